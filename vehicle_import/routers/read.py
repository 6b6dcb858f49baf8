import logging
import re
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from vehicle_import.db import get_db
from vehicle_import.models import Vehicle
from vehicle_import.repositories import list_vehicles
from vehicle_import.settings import VEHICLES_DEFAULT_LIMIT, VEHICLES_MAX_LIMIT

log = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["read"])

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# -------------------------------------------------------------------
# Helper serializer: turn ORM objects into plain dicts for JSON
# -------------------------------------------------------------------
def _vehicle_to_dict(v: Vehicle) -> Dict[str, Any]:
    return {
        "id": v.id,
        "provider": v.provider,
        "uuid": v.uuid,
        "vin": v.vin,
        "make": v.make,
        "model": v.model,
        "mileage": v.mileage,
        "year": v.year,
        "price": v.price,
        "zip_code": v.zip_code,
        "create_date": v.create_date,
        "update_date": v.update_date,
    }


def resolve_limit(raw: Optional[str]) -> int:
    """
    Reads the leading integer ("10abc" -> 10, like parseInt). Anything without
    one, non-positive, or above the max falls back to the default (it is not clamped).
    """
    m = _LEADING_INT.match(raw) if raw is not None else None
    n = int(m.group(1)) if m else None
    if n is None or n < 1 or n > VEHICLES_MAX_LIMIT:
        return VEHICLES_DEFAULT_LIMIT
    return n

# -------------------------------------------------------------------
# List endpoint
# -------------------------------------------------------------------
@router.get("/vehicles")
def get_vehicles(
    limit: Optional[str] = Query(None, description=f"Max rows (1-{VEHICLES_MAX_LIMIT})"),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    """List imported vehicles in import order."""
    lim = resolve_limit(limit)
    log.debug("Fetching vehicles, limit %d", lim)
    rows = [_vehicle_to_dict(v) for v in list_vehicles(db, lim)]
    log.debug("Sending vehicles response with %d records", len(rows))
    return rows
