FIREBASE_CREDENTIALS = ""
FIREBASE_PROJECT_ID = "test-project"

SCHOOL_TIMEZONE = "Asia/Jakarta"
WEEKDAY_LOCALE = "en"

SWEEP_ENABLED = False
SWEEP_INTERVAL_MINUTES = 5

MISSING_ID_NUMBER = "no id"
ABSENT_STATUS = "absent"

STUDENT_ROLE_LABEL = "student"
TEACHER_ROLE_LABEL = "teacher"
ADMIN_ROLE_LABEL = "admin"

CORS_ORIGINS = ["*"]

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True
