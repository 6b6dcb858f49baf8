# vehicle_import/settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Pick up a local .env (same convention as client/.env)
load_dotenv(PROJECT_ROOT / ".env")

SERVICE_NAME = "vehicle-import"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./vehicles.sqlite3")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# When set, error.log and combined.log are written here in addition to stdout
LOG_DIR = os.getenv("LOG_DIR") or None

# GET /vehicles paging
VEHICLES_DEFAULT_LIMIT = int(os.getenv("VEHICLES_DEFAULT_LIMIT", "50"))
VEHICLES_MAX_LIMIT = int(os.getenv("VEHICLES_MAX_LIMIT", "200"))
