# vehicle_import/normalizers/types.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# One CSV line as the tokenizer hands it over: header -> raw cell
RawRow = Mapping[str, Optional[str]]

# canonical field -> typed value, plus "provider"
VehicleRecord = Dict[str, Any]


class CoercionKind(str, Enum):
    IDENTITY = "identity"
    DATE = "date"
    MONEY = "money"


@dataclass(frozen=True)
class ColumnDefinition:
    display_name: str      # header as providers usually spell it
    canonical_field: str   # key on the VehicleRecord / column in the DB
    coercion_kind: CoercionKind = CoercionKind.IDENTITY


@dataclass(frozen=True)
class Coerced:
    """Outcome of coercing one raw cell. `ok=False` means the cell was present but unusable."""
    ok: bool
    value: Any = None
    reason: str | None = None


@dataclass(frozen=True)
class Diagnostic:
    severity: str               # "debug" | "info" | "warning" | "error"
    message: str
    row_index: int | None = None
    field: str | None = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity,
            "message": self.message,
            "row_index": self.row_index,
            "field": self.field,
        }
