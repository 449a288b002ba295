"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CLASS_COUNT = 12

MAX_PHOTO_BYTES = 5 * 1024 * 1024
PHOTO_URL_TTL_SECONDS = 31536000

DEFAULT_ADMIN_EMAIL = "admin@school.com"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_ADMIN_NAME = "Administrator"
DEFAULT_SIGNUP_NAME = "Admin User"
MIN_PASSWORD_LENGTH = 6

GOOD_ATTENDANCE_PERCENT = 75
FAIR_ATTENDANCE_PERCENT = 60

ALL = "all"
