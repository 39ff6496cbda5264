"""School attendance automation.

This package is organized by feature modules (schedules, users, attendance,
sweep, ...) with a thin Flask controller layer over service/repository layers.
"""
