import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "student_attendance"),
}

# S3 or any S3-compatible store (MinIO for local development)
PHOTO_STORAGE = {
    "bucket": os.getenv("PHOTO_BUCKET", "student-photos"),
    "endpoint_url": os.getenv("S3_ENDPOINT_URL", "http://localhost:9000"),
    "region": os.getenv("S3_REGION", "us-east-1"),
    "access_key": os.getenv("S3_ACCESS_KEY", "minioadmin"),
    "secret_key": os.getenv("S3_SECRET_KEY", "minioadmin"),
    "url_ttl_seconds": int(os.getenv("PHOTO_URL_TTL_SECONDS", "31536000")),
}

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
AUTO_INIT_STORAGE = bool(int(os.getenv("AUTO_INIT_STORAGE", "1")))
