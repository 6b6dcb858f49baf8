from collections.abc import Mapping
from typing import Tuple

from .base import Normalizer
from .coercers import coerce
from .columns import COLUMNS, find_header
from .diagnostics import DiagnosticSink
from .types import CoercionKind, ColumnDefinition, Diagnostic, RawRow, VehicleRecord


class RowNormalizer(Normalizer):
    """
    Registry-driven normalizer:
    takes one raw CSV row (header -> cell) and produces a vehicle record
    with every canonical field present, typed where the registry says so.
    """
    def __init__(self, columns: Tuple[ColumnDefinition, ...] = COLUMNS):
        self.columns = columns

    def normalize_row(
        self, row: RawRow, provider: str, row_index: int, sink: DiagnosticSink
    ) -> VehicleRecord:
        if not isinstance(row, Mapping):
            row = {}
        headers = list(row.keys())
        vehicle: VehicleRecord = {"provider": provider}

        for column in self.columns:
            header = find_header(headers, column)
            if header is None:
                # missing column: no coercion attempted
                vehicle[column.canonical_field] = None
                continue

            result = coerce(column.coercion_kind, row.get(header))
            if not result.ok and column.coercion_kind is CoercionKind.DATE:
                sink.emit(Diagnostic(
                    "warning",
                    f"Unable to convert date at row {row_index}: {result.reason}",
                    row_index=row_index,
                    field=column.canonical_field,
                ))
            # unparsable money is blanked without a diagnostic
            vehicle[column.canonical_field] = result.value if result.ok else None

        return vehicle
