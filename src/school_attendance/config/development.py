import os

# Service account JSON; empty means application default credentials.
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS", "serviceAccountKey.json")
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID") or None

SCHOOL_TIMEZONE = os.getenv("SCHOOL_TIMEZONE", "Asia/Jakarta")
WEEKDAY_LOCALE = os.getenv("WEEKDAY_LOCALE", "en")

# Run the absence sweep inside the web process. Off by default so `flask sweep`
# and the reloader do not start extra schedulers.
SWEEP_ENABLED = bool(int(os.getenv("SWEEP_ENABLED", "0")))
SWEEP_INTERVAL_MINUTES = int(os.getenv("SWEEP_INTERVAL_MINUTES", "5"))

MISSING_ID_NUMBER = os.getenv("MISSING_ID_NUMBER", "no id")
ABSENT_STATUS = os.getenv("ABSENT_STATUS", "absent")

# Labels stored in users.role.
STUDENT_ROLE_LABEL = os.getenv("STUDENT_ROLE_LABEL", "student")
TEACHER_ROLE_LABEL = os.getenv("TEACHER_ROLE_LABEL", "teacher")
ADMIN_ROLE_LABEL = os.getenv("ADMIN_ROLE_LABEL", "admin")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True
