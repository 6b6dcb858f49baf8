import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from vehicle_import.csv_reader import CsvDecodeError, read_rows
from vehicle_import.db import get_db
from vehicle_import.normalizers import CollectingSink, get_default_normalizer
from vehicle_import.repositories import insert_vehicles

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["import"])


# Response schema for a finished upload
class ImportResult(BaseModel):
    ok: bool
    provider: str
    received: int        # rows in the file (header excluded)
    imported: int        # rows stored
    dropped: int         # blank rows
    failed: int          # rows the DB rejected
    warnings: List[Dict[str, Any]] = []
    errors: List[Dict[str, Any]] = []

IMPORT_FORM = """\
<!doctype html>
<html>
  <head><title>Vehicle import</title></head>
  <body>
    <h1>Import vehicles</h1>
    <form action="/import" method="post" enctype="multipart/form-data">
      <p><label>Provider <input type="text" name="provider" required></label></p>
      <p><label>CSV file <input type="file" name="csv" accept=".csv,text/csv" required></label></p>
      <p><button type="submit">Upload</button></p>
    </form>
  </body>
</html>
"""


@router.get("/import", response_class=HTMLResponse)
def import_form():
    """Minimal upload form for manual imports."""
    return IMPORT_FORM


@router.post("/import", response_model=ImportResult)
def import_csv(
    file: Optional[UploadFile] = File(None, alias="csv"),
    provider: Optional[str] = Form(None),
    db: Session = Depends(get_db),
) -> ImportResult:
    """
    Import a provider's vehicle CSV.

    Accepts (multipart/form-data):
        csv       the CSV file, first line is the header row
        provider  tag stored on every imported vehicle

    Behavior:
        * Headers are matched case-insensitively against the column registry;
          unknown columns are ignored, missing ones are stored as null.
        * Unparsable dates/prices are stored as null; dates produce a warning.
        * Blank rows are dropped.

    Returns:
        {
          "ok": True,
          "provider": <provider>,
          "received": <rows in file>,
          "imported": <rows stored>,
          "dropped": <blank rows>,
          "failed": <rows the DB rejected>,
          "warnings": [ ... up to 10 diagnostics ... ],
          "errors": [ ... up to 10 storage errors ... ]
        }
    """
    provider = (provider or "").strip()
    if file is None or not provider:
        raise HTTPException(400, "Both a 'csv' file and a non-empty 'provider' are required")

    log.info("Received file %s from provider %s", file.filename, provider)
    try:
        rows = read_rows(file.file.read())
    except CsvDecodeError as e:
        raise HTTPException(400, str(e))
    finally:
        file.file.close()
    log.info("Finished reading CSV file, got %d rows", len(rows))

    sink = CollectingSink()
    vehicles = get_default_normalizer().normalize_batch(rows, provider, sink=sink)
    log.info("Done processing file content: %d vehicle(s)", len(vehicles))

    if not vehicles:
        log.error("No vehicles available to persist (provider=%s)", provider)
        raise HTTPException(400, "No vehicles found in file")

    try:
        ok, errors = insert_vehicles(db, vehicles)
        db.commit()
    except Exception as e:
        db.rollback()
        log.exception("Unable to store vehicles into db")
        raise HTTPException(500, f"Import failed: {e}")

    return ImportResult(
        ok=True,
        provider=provider,
        received=len(rows),
        imported=ok,
        dropped=len(rows) - len(vehicles),
        failed=len(errors),
        warnings=[d.as_dict() for d in sink.diagnostics[:10]],
        errors=errors[:10],
    )
