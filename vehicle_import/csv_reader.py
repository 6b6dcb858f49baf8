import csv
import io
from typing import Dict, List, Optional


class CsvDecodeError(ValueError):
    """Raised when an uploaded file is not UTF-8 text."""


def read_rows(data: bytes) -> List[Dict[str, Optional[str]]]:
    """
    Tokenize an uploaded CSV file into one header -> cell mapping per line.
    The first line is the header row; a UTF-8 BOM is tolerated.
    Short lines get None for the missing cells (csv.DictReader semantics).
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CsvDecodeError(f"file is not valid UTF-8: {e}") from e
    reader = csv.DictReader(io.StringIO(text, newline=""))
    return [dict(r) for r in reader]
