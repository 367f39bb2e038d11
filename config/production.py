import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")
TOKEN_LIFETIME_HOURS = int(os.getenv("TOKEN_LIFETIME_HOURS", "24"))

DB_CONFIG = {
    "host": os.getenv("MYSQLHOST", os.getenv("DB_HOST", "localhost")),
    "port": int(os.getenv("MYSQLPORT", os.getenv("DB_PORT", "3306"))),
    "user": os.getenv("MYSQLUSER", os.getenv("DB_USER", "attendance_user")),
    "password": os.getenv("MYSQLPASSWORD", os.getenv("DB_PASSWORD", "")),
    "database": os.getenv("MYSQLDATABASE", os.getenv("DB_NAME", "attendance_tracker")),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
# Seconds a request waits for a free pooled connection before failing.
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "10"))

SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "5000"))

CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
    if origin.strip()
]

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
