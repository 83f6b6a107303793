from __future__ import annotations
import logging
import math

from . import canon, exceptions
from .types import HeaderMap, ParseWarning, Recovered, RowResult, TimeSeriesRecord

logger = logging.getLogger(__name__)


def split_row(line: str, delimiter: str = canon.DEFAULT_DELIMITER) -> list[str]:
    return [tok.strip() for tok in line.split(delimiter)]


def row_label(date_text: str, row_number: int) -> str:
    """Date text, or 'Row <n>' when the date cell is empty."""
    return date_text or canon.ROW_LABEL_FMT.format(n=row_number)


def parse_number(text: str, field: str, row: int) -> Recovered:
    """
    Parse a numeric cell.

    Unparseable, empty or non-finite text is not an error: it recovers to
    0.0 and carries a ParseWarning naming the field, row and original text.
    """
    try:
        value = float(text)
    except ValueError:
        value = math.nan
    if math.isfinite(value):
        return Recovered(value)

    warning = ParseWarning(field=field, row=row, text=text)
    logger.warning(warning.message)
    return Recovered(0.0, warning)


def check_shape(tokens: list[str], header_map: HeaderMap, row_number: int) -> None:
    if len(tokens) != header_map.width:
        raise exceptions.RowShapeError(
            row=row_number, expected=header_map.width, actual=len(tokens)
        )


def validate_row(
    line: str,
    header_map: HeaderMap,
    row_number: int,
    *,
    delimiter: str = canon.DEFAULT_DELIMITER,
) -> RowResult:
    """
    Validate one data line against the resolved header.

    `row_number` is 1-based with the header as row 1, so the first data
    line is row 2. Raises RowShapeError on a column-count mismatch; bad
    numbers never raise.
    """
    tokens = split_row(line, delimiter)
    check_shape(tokens, header_map, row_number)

    date_idx = header_map[canon.DATE_FIELD]
    label = row_label(tokens[date_idx] if date_idx is not None else "", row_number)

    values: dict[str, float] = {}
    warnings: list[ParseWarning] = []
    for name in canon.NUMERIC_FIELDS:
        idx = header_map[name]
        if idx is None:
            # already reported once at header stage
            values[canon.ATTRS[name]] = 0.0
            continue
        res = parse_number(tokens[idx], name, row_number)
        values[canon.ATTRS[name]] = res.value
        if res.warning is not None:
            warnings.append(res.warning)

    return RowResult(record=TimeSeriesRecord(label=label, **values), warnings=warnings)
