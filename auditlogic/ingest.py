from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from . import exceptions, headers, validate
from .config import IngestConfig
from .types import IngestResult, ParseWarning, TimeSeriesRecord

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Strip surrounding whitespace and split on line feeds only (a trailing CR is trimmed per token)."""
    return text.strip().split("\n")


def from_text(text: str, *, config: Optional[IngestConfig] = None) -> IngestResult:
    """
    Parse consumption CSV text into an ordered list of TimeSeriesRecord.

      - header resolved onto the canonical schema (SchemaMismatch if strict)
      - one record per data line, in file order
      - bad numeric cells recover to 0.0 and are collected on .warnings
      - any row whose column count differs from the header aborts the parse
    """
    cfg = config or IngestConfig()
    lines = split_lines(text)
    if len(lines) < 2:
        raise exceptions.EmptyDatasetError()

    header_map = headers.resolve_headers(lines[0], config=cfg)

    records: list[TimeSeriesRecord] = []
    warnings: list[ParseWarning] = []
    for row_number, line in enumerate(lines[1:], start=2):
        res = validate.validate_row(
            line, header_map, row_number, delimiter=cfg.delimiter
        )
        records.append(res.record)
        warnings.extend(res.warnings)

    logger.info(
        "Ingested %d rows (%d recovered cells)", len(records), len(warnings)
    )
    return IngestResult(header_map=header_map, records=records, warnings=warnings)


def from_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    config: Optional[IngestConfig] = None,
) -> IngestResult:
    """Read a CSV file in one shot and parse it with from_text."""
    text = Path(path).read_text(encoding=encoding)
    return from_text(text, config=config)
