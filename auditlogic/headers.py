from __future__ import annotations
import logging
from typing import Optional, Sequence

from . import canon, exceptions
from .config import IngestConfig
from .types import HeaderMap

logger = logging.getLogger(__name__)


def split_header(line: str, delimiter: str = canon.DEFAULT_DELIMITER) -> list[str]:
    """Split a header line into trimmed, lower-cased tokens (no quoting)."""
    return [tok.strip().lower() for tok in line.split(delimiter)]


def _exact_index(tokens: Sequence[str], name: str) -> Optional[int]:
    candidates = (canon.TEMPLATE_LABELS[name].lower(), name.lower())
    return next((i for i, tok in enumerate(tokens) if tok in candidates), None)


def _substring_index(tokens: Sequence[str], name: str) -> Optional[int]:
    terms = canon.SYNONYMS[name]
    return next(
        (i for i, tok in enumerate(tokens) if any(t in tok for t in terms)), None
    )


def find_column(
    tokens: Sequence[str], name: str, *, prefer_exact: bool = True
) -> Optional[int]:
    """
    Index of the column holding canonical field `name`, or None.

    An exact template label (e.g. 'hvac (kwh)') or bare canonical name wins
    outright; otherwise the first token containing any synonym is used.
    """
    if prefer_exact:
        idx = _exact_index(tokens, name)
        if idx is not None:
            return idx
    return _substring_index(tokens, name)


def resolve_headers(line: str, *, config: Optional[IngestConfig] = None) -> HeaderMap:
    """
    Map a raw CSV header line onto the canonical schema.

    Raises SchemaMismatch naming every unmatched field when strict.
    """
    cfg = config or IngestConfig()
    tokens = split_header(line, cfg.delimiter)

    columns = {
        name: find_column(tokens, name, prefer_exact=cfg.prefer_exact)
        for name in canon.FIELDS
    }
    missing = [name for name, idx in columns.items() if idx is None]
    if missing and cfg.strict:
        raise exceptions.SchemaMismatch(missing)
    if missing:
        logger.info("Header fields not found, defaulting to 0: %s", ", ".join(missing))

    logger.debug("Resolved headers %s -> %s", tokens, columns)
    return HeaderMap(columns=columns, width=len(tokens))
