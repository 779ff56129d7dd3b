"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_WORKING_DAYS = 20
DEFAULT_REFRESH_INTERVAL_SECONDS = 60
MAX_OVERLAPPING_REFRESHES = 3
DEFAULT_HTTP_TIMEOUT = 20

ADMIN_ROLES = frozenset({"Admin", "Superadmin"})
SICK_LEAVE_CATEGORIES = frozenset({"Sakit", "Sick"})

TIME_PLACEHOLDER = "--:--"
HTML_DOCUMENT_MARKER = "<!doctype html>"

GOOD_PERCENTAGE = 90
WARNING_PERCENTAGE = 75
