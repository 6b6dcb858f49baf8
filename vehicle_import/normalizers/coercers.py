import math
import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict

from dateutil import parser as date_parser

from .types import CoercionKind, Coerced

Coercer = Callable[[Any], Coerced]

_NOT_MONEY_CHARS = re.compile(r"[^0-9.-]+")

# Missing date parts (year-only, month+year, time-only) fill from here, never from today
_DATE_DEFAULT = datetime(1970, 1, 1)


def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


# --- Individual field coercers (never raise; failures come back tagged) ---

def coerce_identity(raw: Any) -> Coerced:
    """Pass the cell through untouched."""
    return Coerced(True, raw)


def coerce_date(raw: Any) -> Coerced:
    """
    Permissive date/time parsing ("2023-01-15", "Jan 15 2023", "01/15/2023 10:00").
    Timezone-aware results are converted to naive UTC, the same as the DB stores them.
    Absent or blank cells are not an error.
    """
    if _is_blank(raw):
        return Coerced(True, None)
    if isinstance(raw, datetime):
        parsed = raw
    else:
        text = str(raw).strip()
        try:
            parsed = date_parser.parse(text, default=_DATE_DEFAULT)
        except (date_parser.ParserError, ValueError, OverflowError, TypeError) as e:
            return Coerced(False, reason=f"invalid date {text!r}: {e}")
    # the parser should only ever hand back a datetime; anything else is a failed parse
    if not isinstance(parsed, datetime):
        return Coerced(False, reason=f"invalid date {raw!r}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return Coerced(True, parsed)


def coerce_money(raw: Any) -> Coerced:
    """Strip currency symbols and separators ("$12,345.67" -> 12345.67, "-$50" -> -50.0)."""
    if _is_blank(raw):
        return Coerced(True, None)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = float(raw)
    else:
        cleaned = _NOT_MONEY_CHARS.sub("", str(raw))
        if not cleaned:
            return Coerced(False, reason=f"no numeric value in {raw!r}")
        try:
            value = float(cleaned)
        except ValueError:
            return Coerced(False, reason=f"invalid amount {raw!r}")
    if not math.isfinite(value):
        return Coerced(False, reason=f"amount out of range {raw!r}")
    return Coerced(True, value)


COERCERS: Dict[CoercionKind, Coercer] = {
    CoercionKind.IDENTITY: coerce_identity,
    CoercionKind.DATE: coerce_date,
    CoercionKind.MONEY: coerce_money,
}


def coerce(kind: CoercionKind, raw: Any) -> Coerced:
    return COERCERS[kind](raw)
