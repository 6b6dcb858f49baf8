import logging
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, StatementError
from sqlalchemy.orm import Session
from vehicle_import.models import Vehicle
from vehicle_import.normalizers import VehicleRecord

log = logging.getLogger(__name__)

def insert_vehicles(db: Session, records: list[VehicleRecord]) -> tuple[int, list[dict]]:
    """
    Insert normalized vehicle records as-is (one row each).
    Every record gets its own savepoint so one bad row doesn't poison the batch.
    The caller commits.
    """
    ok = 0
    errors: list[dict] = []

    for i, rec in enumerate(records):
        try:
            with db.begin_nested():
                db.add(Vehicle(**rec))
            ok += 1
        except (IntegrityError, StatementError, TypeError, ValueError) as e:
            log.exception("vehicle insert failed: index=%s vin=%s", i, rec.get("vin"))
            errors.append({"kind": "vehicle", "index": i, "vin": rec.get("vin"), "error": str(e)})

    return ok, errors


def list_vehicles(db: Session, limit: int) -> list[Vehicle]:
    """Stored vehicles in insertion order."""
    q = select(Vehicle).order_by(Vehicle.id).limit(limit)
    return list(db.execute(q).scalars().all())
