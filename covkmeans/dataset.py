"""Loading numeric CSV samples, dropping the trailing label column."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator
from os import PathLike

DEFAULT_DATA_FILE = "covtype.csv"

_C_SPACE = " \t\n\v\f\r"
_LINE_TRAILERS = "\r\n,"

_HEX_RE = re.compile(
    r"([+-]?)0[xX]((?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
)
_SPECIAL_RE = re.compile(r"[+-]?(?:infinity|inf|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE)
_DECIMAL_RE = re.compile(r"[+-]?(?:(\d+)(?:\.(\d*))?|\.(\d+))(?:[eE][+-]?\d+)?")


class DatasetError(Exception):
    """Raised when a data file cannot be read or holds an unusable value."""


def _leading_float(text: str) -> float | None:
    """Parse the longest numeric prefix of ``text``; None when there is none."""
    match = _HEX_RE.match(text)
    if match:
        sign, body = match.groups()
        try:
            return float.fromhex(sign + "0x" + body)
        except OverflowError:
            raise DatasetError(f"value out of range: {text!r}") from None

    match = _SPECIAL_RE.match(text)
    if match:
        token = match.group(0).lower()
        sign = "-" if token.startswith("-") else ""
        return float(sign + ("nan" if "nan" in token else "inf"))

    match = _DECIMAL_RE.match(text)
    if not match:
        return None
    value = float(match.group(0))
    if math.isinf(value):
        raise DatasetError(f"value out of range: {text!r}")
    digits = "".join(part or "" for part in match.groups())
    if value == 0.0 and digits.strip("0"):
        raise DatasetError(f"value out of range: {text!r}")
    return value


def parse_row(line: str) -> list[float] | None:
    """Parse one CSV line into its features, or None when nothing is left.

    Trailing CR, LF and commas are removed, each cell is trimmed, cells that
    do not start with a number are ignored, and the last value (the label)
    is dropped.
    """
    line = line.rstrip(_LINE_TRAILERS)
    if not line:
        return None
    values = [
        value
        for cell in line.split(",")
        if (value := _leading_float(cell.strip(_C_SPACE))) is not None
    ]
    features = values[:-1]
    return features or None


def iter_rows(lines: Iterable[str]) -> Iterator[list[float]]:
    """Yield the feature rows of the given lines, skipping unusable ones."""
    for line in lines:
        row = parse_row(line)
        if row is not None:
            yield row


def load_csv(path: str | PathLike[str], skip_header: bool = True) -> list[list[float]]:
    """Read every sample of a numeric CSV file."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="\n") as handle:
            if skip_header and not handle.readline():
                raise DatasetError(f"file is empty, no header to skip: {path}")
            return list(iter_rows(handle))
    except OSError as exc:
        raise DatasetError(f"cannot open file: {path}") from exc