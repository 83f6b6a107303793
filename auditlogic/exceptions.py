from __future__ import annotations
from typing import Iterable


class AuditError(Exception): ...


class IngestError(AuditError): ...


class SchemaMismatch(IngestError):
    """Header row lacks one or more canonical fields."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required headers: {', '.join(self.missing)}")


class EmptyDatasetError(IngestError):
    def __init__(self, message: str | None = None):
        super().__init__(
            message or "CSV file must contain headers and at least one row of data"
        )


class RowShapeError(IngestError):
    """A data row's column count disagrees with the header."""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row} has {actual} columns, expected {expected} to match the header."
        )


class AnalysisError(AuditError): ...


class StoreError(AuditError): ...


def require(condition: bool, message: str, exc: type[AuditError] = AuditError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
