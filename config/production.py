import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "student_attendance"),
}

# Credentials fall back to the standard AWS chain when unset
PHOTO_STORAGE = {
    "bucket": os.getenv("PHOTO_BUCKET", "student-photos"),
    "endpoint_url": os.getenv("S3_ENDPOINT_URL"),
    "region": os.getenv("S3_REGION"),
    "access_key": os.getenv("S3_ACCESS_KEY"),
    "secret_key": os.getenv("S3_SECRET_KEY"),
    "url_ttl_seconds": int(os.getenv("PHOTO_URL_TTL_SECONDS", "31536000")),
}

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
AUTO_INIT_STORAGE = bool(int(os.getenv("AUTO_INIT_STORAGE", "0")))
