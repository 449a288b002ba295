import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "student_attendance_test"),
}

PHOTO_STORAGE = {
    "bucket": "student-photos-test",
    "endpoint_url": None,
    "region": "us-east-1",
    "access_key": "testing",
    "secret_key": "testing",
    "url_ttl_seconds": 31536000,
}

CORS_ORIGINS = ["*"]

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
AUTO_INIT_STORAGE = False
