"""School attendance recap package.

Organized by feature modules (directory, dashboard, attendance, recap, ...)
with a thin Flask controller layer over plain service classes.
"""
