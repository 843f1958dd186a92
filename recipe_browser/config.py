"""
Recipe Browser configuration
"""

import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Load environment variables
load_dotenv()


def _pg_url():
    return URL.create(
        "postgresql+psycopg",
        username=os.getenv("PGUSER"),
        password=os.getenv("PGPASSWORD"),
        host=os.getenv("PGHOST", "localhost"),
        port=int(os.getenv("PGPORT", "5432")),
        database=os.getenv("PGDATABASE"),
    ).render_as_string(hide_password=False)


# Database
if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.getenv("DATABASE_URL")
elif os.getenv("PGDATABASE"):
    DATABASE_URL = _pg_url()
else:
    DATABASE_URL = "sqlite:///./recipes.db"
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))

# Server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3001"))

# CORS - comma separated origins, "*" allows any
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_JSON = os.getenv("LOG_JSON", "false").lower() == "true"

# Listing / search limits
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
SEARCH_LIMIT = 200
