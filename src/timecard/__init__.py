"""Timecard screenshot to payroll breakdown."""
__version__ = "0.1.0"
