# vehicle_import/normalizers/base.py
from typing import Protocol
from .diagnostics import DiagnosticSink
from .types import RawRow, VehicleRecord

class Normalizer(Protocol):
    def normalize_row(
        self, row: RawRow, provider: str, row_index: int, sink: DiagnosticSink
    ) -> VehicleRecord:
        """Return a NEW vehicle record for one raw row. Do not mutate `row`."""
        ...
