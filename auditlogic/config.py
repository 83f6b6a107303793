from __future__ import annotations

from dataclasses import dataclass, field

from . import canon


@dataclass
class IngestConfig:
    # Raise SchemaMismatch when a canonical field has no matching column.
    # When False, unmatched fields read as 0.0 for every row.
    strict: bool = True
    delimiter: str = canon.DEFAULT_DELIMITER
    # Try exact template/canonical labels before substring synonyms
    prefer_exact: bool = True


@dataclass
class SummaryConfig:
    include_other: bool = True  # add the "Other" remainder to usage-by-area


@dataclass
class AuditConfig:
    ingest: IngestConfig = field(default_factory=IngestConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)


def default_config() -> AuditConfig:
    return AuditConfig()
