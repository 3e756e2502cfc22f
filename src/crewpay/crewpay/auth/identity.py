"""Who is calling.

Authentication itself lives with the hosted auth provider; the app only needs
the resulting identity. Providers are injected through the container so demo
identities never sit on production code paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from flask import session

from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    user_id: str
    company_id: str
    role: Role


class IdentityProvider(Protocol):
    def current_identity(self) -> Optional[Identity]:
        raise NotImplementedError


class SessionIdentityProvider(IdentityProvider):
    """Identity stored in the Flask session by the sign-in callback."""

    def current_identity(self) -> Optional[Identity]:
        user_id = session.get("user_id")
        company_id = session.get("company_id")
        if not user_id or not company_id:
            return None
        try:
            role = Role(session.get("role") or Role.WORKER.value)
        except ValueError:
            return None
        return Identity(user_id=str(user_id), company_id=str(company_id), role=role)


class DemoIdentityProvider(IdentityProvider):
    """Fixed identity for local demos and tests; wired only when DEMO_AUTH is set."""

    def __init__(self, identity: Identity):
        self._identity = identity

    def current_identity(self) -> Optional[Identity]:
        return self._identity


def build_identity_provider(settings) -> IdentityProvider:
    if bool(getattr(settings, "DEMO_AUTH", False)):
        return DemoIdentityProvider(
            Identity(
                user_id=str(getattr(settings, "DEMO_USER_ID", "demo-user")),
                company_id=str(getattr(settings, "DEMO_COMPANY_ID", "demo-company")),
                role=Role(getattr(settings, "DEMO_ROLE", Role.ADMIN.value)),
            )
        )
    return SessionIdentityProvider()
