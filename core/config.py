"""Application settings read from environment variables.

Values are resolved once at import time. Defaults target a local SQLite
database so the API can be started without any configuration.
"""

import os

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

APP_TITLE = os.getenv("APP_TITLE", "DietHub API")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Read/Write partitioning. Both default to the same SQLite file.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///diethub.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", os.path.join(BASE_DIR, "logs"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").strip().lower() in ("1", "true", "yes", "y")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
