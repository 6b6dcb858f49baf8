from fastapi import FastAPI

from .db import engine, Base
from . import models  # noqa: F401  (registers tables on Base)
from .routers.ingest import router as ingest_router
from .routers.read import router as read_router
from .normalizers import canonical_fields
from .settings import LOG_DIR, LOG_LEVEL, SERVICE_NAME
from .setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(LOG_LEVEL, LOG_DIR) # Init Logging

# Create database tables if they don’t exist.
Base.metadata.create_all(bind=engine)

# Create the FastAPI app instance
app = FastAPI(title="Vehicle CSV Import")

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - columns: canonical fields the importer maps, in registry order
    """
    return {
        "ok": True,
        "service": SERVICE_NAME,
        "version": 1,
        "columns": list(canonical_fields()),
    }

# Register API routers:
app.include_router(ingest_router)
app.include_router(read_router)
