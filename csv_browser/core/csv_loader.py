from __future__ import annotations

import base64
import binascii
import csv
import io
import logging
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from csv_browser.core.coercion import coerce_value
from csv_browser.core.dataset import Dataset, Row
from csv_browser.core.exceptions import CsvParseError

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 50_000_000
TEXT_ENCODINGS = ("utf-8-sig", "latin-1")


def decode_upload(contents: str) -> bytes:
    """
    Decode a dcc.Upload payload ("data:<mime>;base64,<payload>") into raw bytes.

    Raises:
        CsvParseError: if the payload is not a base64 data URL
    """
    try:
        _content_type, content_string = contents.split(",", 1)
        return base64.b64decode(content_string, validate=True)
    except (ValueError, binascii.Error) as e:
        raise CsvParseError(f"Corrupted upload data: {e}") from e


def decode_text(raw: bytes) -> str:
    for encoding in TEXT_ENCODINGS:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise CsvParseError("Could not decode file as text")


def _skip_bad_line(bad_line: List[str]) -> None:
    logger.warning("Skipping unparseable CSV row", extra={"n_fields": len(bad_line)})
    return None


def _unique_columns(header: Sequence[Any]) -> List[str]:
    """Header cells as column names; repeats get a ".1", ".2" ... suffix."""
    columns: List[str] = []
    counts: Dict[str, int] = {}
    for cell in header:
        base = cell if isinstance(cell, str) else ""
        name = base
        while name in counts:
            counts[base] += 1
            name = f"{base}.{counts[base]}"
        counts.setdefault(name, 0)
        columns.append(name)
    return columns


def parse_csv_text(text: str, name: Optional[str] = None) -> Dataset:
    """
    Tokenise CSV text and type every cell.

    - header row defines the columns
    - rows with more fields than the header are skipped
    - blank rows and rows whose cells are all empty are skipped
    - an empty or header-only file yields an empty Dataset

    Raises:
        CsvParseError: if the tokenizer fails (e.g. unterminated quote)
    """
    try:
        # header=None: the header row is read as data, so pandas never infers an
        # implicit index column when the first data row has an extra field
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_skip_bad_line,
        )
    except pd.errors.EmptyDataError:
        logger.info("CSV has no columns", extra={"source": name})
        return Dataset.empty(name=name)
    except (pd.errors.ParserError, csv.Error, ValueError) as e:
        raise CsvParseError(f"Could not parse CSV: {e}") from e

    records = list(df.itertuples(index=False, name=None))
    if not records:
        return Dataset.empty(name=name)

    columns = _unique_columns(records[0])
    rows: List[Row] = []
    for record in records[1:]:
        # Short rows come back padded with NaN
        row = {
            col: coerce_value(value if isinstance(value, str) else None)
            for col, value in zip(columns, record)
        }
        if all(v is None for v in row.values()):
            continue
        rows.append(row)

    if not rows:
        # No data rows: columns reset together with the rows
        return Dataset.empty(name=name)

    logger.info(
        "Parsed CSV",
        extra={"source": name, "rows": len(rows), "columns": len(columns)},
    )
    return Dataset(rows=rows, columns=columns, name=name)


def load_csv_bytes(
    raw: bytes,
    name: Optional[str] = None,
    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
) -> Dataset:
    if len(raw) > max_bytes:
        raise CsvParseError(f"File exceeds the {max_bytes} byte limit ({len(raw)} bytes)")
    return parse_csv_text(decode_text(raw), name=name)


def load_csv_upload(
    contents: str,
    filename: Optional[str] = None,
    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
) -> Dataset:
    """Upload payload -> Dataset. Every failure surfaces as CsvParseError."""
    return load_csv_bytes(decode_upload(contents), name=filename, max_bytes=max_bytes)
