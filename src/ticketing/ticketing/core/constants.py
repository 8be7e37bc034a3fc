"""Constants and defaults.

Note: Keep role names and tunables here to avoid magic strings spread across code.
"""

ROLE_ADMIN = "Admin"
ROLE_MANAGER = "Manager"
ROLE_EMPLOYEE = "Employee"

DELETED_USERNAME_SEPARATOR = "-"

DEFAULT_IDP_TIMEOUT_SECONDS = 5.0
MIN_PASSWORD_LENGTH = 4
