from typing import Iterable, Optional, Tuple
from .types import CoercionKind, ColumnDefinition

# -----------------------------
# Column mapping registry: provider header -> canonical field
# -----------------------------
COLUMNS: Tuple[ColumnDefinition, ...] = (
    ColumnDefinition("UUID",        "uuid"),
    ColumnDefinition("VIN",         "vin"),
    ColumnDefinition("Make",        "make"),
    ColumnDefinition("Model",       "model"),
    ColumnDefinition("Mileage",     "mileage"),
    ColumnDefinition("Year",        "year"),
    ColumnDefinition("Price",       "price",       CoercionKind.MONEY),
    ColumnDefinition("Zip Code",    "zip_code"),
    ColumnDefinition("Create Date", "create_date", CoercionKind.DATE),
    ColumnDefinition("Update Date", "update_date", CoercionKind.DATE),
)


def _check_unique(columns: Tuple[ColumnDefinition, ...]) -> None:
    seen = set()
    for c in columns:
        if c.canonical_field in seen:
            raise ValueError(f"duplicate canonical field in column registry: {c.canonical_field}")
        seen.add(c.canonical_field)

_check_unique(COLUMNS)


def canonical_fields(columns: Tuple[ColumnDefinition, ...] = COLUMNS) -> Tuple[str, ...]:
    """Canonical field names in registry order."""
    return tuple(c.canonical_field for c in columns)


def find_header(headers: Iterable, column: ColumnDefinition) -> Optional[str]:
    """
    Case-insensitive, exact-match header lookup.
    Returns the first header (in file order) matching the column's display name,
    or None. Non-string keys (csv.DictReader's overflow key is None) are skipped.
    """
    wanted = column.display_name.lower()
    for h in headers:
        if isinstance(h, str) and h.lower() == wanted:
            return h
    return None
