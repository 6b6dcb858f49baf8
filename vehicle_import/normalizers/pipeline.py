import logging
from typing import List, Optional, Sequence

from .diagnostics import DiagnosticSink, LoggingSink
from .rows import RowNormalizer
from .types import Diagnostic, RawRow, VehicleRecord

log = logging.getLogger(__name__)


def _is_populated(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def has_vehicle_data(vehicle: VehicleRecord) -> bool:
    """True if any field other than `provider` carries a usable value."""
    return any(_is_populated(v) for k, v in vehicle.items() if k != "provider")


class BatchNormalizer:
    """
    Runs the row normalizer over a whole uploaded file.
    Rows that end up with nothing but a provider (blank lines, filler rows)
    are dropped; order of the surviving rows is kept.
    """
    def __init__(self, row_normalizer: Optional[RowNormalizer] = None):
        self.row_normalizer = row_normalizer or RowNormalizer()

    def normalize_batch(
        self,
        rows: Optional[Sequence[RawRow]],
        provider: str,
        sink: Optional[DiagnosticSink] = None,
    ) -> List[VehicleRecord]:
        sink = sink or LoggingSink()

        if not rows:
            sink.emit(Diagnostic("error", "No rows received"))
            return []

        vehicles = [
            self.row_normalizer.normalize_row(row, provider, i, sink)
            for i, row in enumerate(rows)
        ]
        kept = [v for v in vehicles if has_vehicle_data(v)]

        dropped = len(vehicles) - len(kept)
        if dropped:
            log.debug("dropped %d blank row(s) out of %d", dropped, len(vehicles))
        return kept


def get_default_normalizer() -> BatchNormalizer:
    """Factory for the default batch normalizer (built-in column registry)."""
    return BatchNormalizer(RowNormalizer())


def normalize_batch(
    rows: Optional[Sequence[RawRow]],
    provider: str,
    sink: Optional[DiagnosticSink] = None,
) -> List[VehicleRecord]:
    return get_default_normalizer().normalize_batch(rows, provider, sink)
