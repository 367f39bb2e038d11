"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_LIFETIME_HOURS = 24
MIN_PASSWORD_LENGTH = 6
JWT_ALGORITHM = "HS256"
DEFAULT_POOL_SIZE = 10
DEFAULT_POOL_TIMEOUT_SECONDS = 10.0
DEFAULT_SERVER_PORT = 5000
