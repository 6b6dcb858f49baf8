from .pipeline import get_default_normalizer, normalize_batch, BatchNormalizer
from .rows import RowNormalizer
from .columns import COLUMNS, canonical_fields, find_header
from .coercers import coerce, coerce_date, coerce_identity, coerce_money
from .diagnostics import CollectingSink, DiagnosticSink, LoggingSink
from .types import CoercionKind, Coerced, ColumnDefinition, Diagnostic, RawRow, VehicleRecord
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "normalize_batch",
    "BatchNormalizer",
    "RowNormalizer",
    "COLUMNS",
    "canonical_fields",
    "find_header",
    "coerce",
    "coerce_date",
    "coerce_identity",
    "coerce_money",
    "CollectingSink",
    "DiagnosticSink",
    "LoggingSink",
    "CoercionKind",
    "Coerced",
    "ColumnDefinition",
    "Diagnostic",
    "RawRow",
    "VehicleRecord",
    "Normalizer",
]
