"""crewpay package.

Timesheet and payroll core for a construction crew SaaS, organized by feature
modules (timesheets, payroll, settings, qr_clock, ...) with a thin Flask
controller layer over service/repository layers.
"""
