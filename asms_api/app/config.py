"""
Runtime configuration for the ASMS chat & auth service.
Values are read from environment variables with local-development defaults.
"""

import os
from typing import List

APP_TITLE = os.environ.get("APP_TITLE", "ASMS Chat & Auth Service")
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")

APP_HOST = os.environ.get("APP_HOST", "0.0.0.0")
APP_PORT = int(os.environ.get("APP_PORT", "8000"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Frontend dev servers (Next.js)
DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000,http://localhost:3001"

# User id returned by the stub identity resolver until tokens carry one
DEFAULT_USER_ID = int(os.environ.get("DEFAULT_USER_ID", "1"))

CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_MAX_AGE = 3600


def get_allowed_origins() -> List[str]:
    """Parse ALLOWED_ORIGINS (comma separated) into a list"""
    raw = os.environ.get("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
