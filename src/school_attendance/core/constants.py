"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

SCHEDULES_COLLECTION = "schedules"
USERS_COLLECTION = "users"
ATTENDANCE_COLLECTION = "attendance"

DEFAULT_SCHOOL_TIMEZONE = "Asia/Jakarta"
DEFAULT_WEEKDAY_LOCALE = "en"
DEFAULT_SWEEP_INTERVAL_MINUTES = 5
DEFAULT_MISSING_ID_NUMBER = "no id"
DEFAULT_ABSENT_STATUS = "absent"

SNAPSHOT_DATE_FORMAT = "%d/%m/%Y"
SNAPSHOT_TIME_FORMAT = "%H:%M"

# Firestore rejects batches with more than 500 writes.
MAX_BATCH_WRITES = 500
