"""Schema bootstrap and the schema-version gate.

The schema file is idempotent (CREATE TABLE IF NOT EXISTS). After applying it
we stamp ``schema_version`` so the app can refuse to start against an older
database instead of probing for optional columns at request time.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector

from ..core.exceptions import SchemaVersionError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone

logger = logging.getLogger(__name__)

# Bump together with database/schema.sql.
SCHEMA_VERSION = 3


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "crewpay")),
    )


def _connect(target: DBTarget, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ';' outside quoted strings."""
    buf: list[str] = []
    quote: Optional[str] = None
    escape = False

    for ch in sql:
        buf.append(ch)
        if escape:
            escape = False
        elif ch == "\\":
            escape = True
        elif quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = "".join(buf[:-1]).strip()
            buf.clear()
            if stmt:
                yield stmt

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    target = _as_target(db_config)
    ensure_database_exists(db_config)

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        cur.execute("DELETE FROM schema_version")
        cur.execute("INSERT INTO schema_version (version) VALUES (%s)", (SCHEMA_VERSION,))
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %s to %s (schema_version=%s)", Path(schema_path).name, target.database, SCHEMA_VERSION)


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def read_schema_version(conn_factory: DatabaseConnection) -> int:
    """Recorded schema version; 0 when the database was never bootstrapped."""
    try:
        with db_cursor(conn_factory) as (_, cur):
            cur.execute("SELECT MAX(version) AS version FROM schema_version")
            row = fetchone(cur)
    except mysql.connector.errors.ProgrammingError as e:
        logger.warning("Cannot read schema_version (%s)", e)
        return 0
    if not row or row.get("version") is None:
        return 0
    return int(row["version"])


def check_schema_version(conn_factory: DatabaseConnection, *, required: int = SCHEMA_VERSION) -> int:
    """Raise SchemaVersionError unless the database is at ``required`` or newer."""
    version = read_schema_version(conn_factory)
    if version < required:
        raise SchemaVersionError(
            f"Database schema is at version {version}, version {required} is required; run scripts/init_db.py"
        )
    return version
