import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
JWT_SECRET = os.getenv("JWT_SECRET", "employee-attendance-tracker-dev-secret")
TOKEN_LIFETIME_HOURS = int(os.getenv("TOKEN_LIFETIME_HOURS", "24"))

# MYSQL* names are what managed MySQL hosts inject; DB_* are the local names.
DB_CONFIG = {
    "host": os.getenv("MYSQLHOST", os.getenv("DB_HOST", "localhost")),
    "port": int(os.getenv("MYSQLPORT", os.getenv("DB_PORT", "3306"))),
    "user": os.getenv("MYSQLUSER", os.getenv("DB_USER", "attendance_user")),
    "password": os.getenv("MYSQLPASSWORD", os.getenv("DB_PASSWORD", "123456")),
    "database": os.getenv("MYSQLDATABASE", os.getenv("DB_NAME", "attendance_tracker")),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
# Seconds a request waits for a free pooled connection before failing.
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "10"))

SERVER_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT = int(os.getenv("SERVER_PORT", "5000"))

CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply attendance_tracker/database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
