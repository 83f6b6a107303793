from __future__ import annotations
import json
import logging
import time
from dataclasses import dataclass, field
from datetime import date as _date
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from . import exceptions, prompt
from .ingest import from_text
from .summary import averages, summarise
from .config import AuditConfig, default_config
from .types import (
    BuildingInfo,
    BuildingSystems,
    IngestResult,
    Report,
    SummaryPayload,
    VerificationInfo,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# Store keys
CSV_KEY = "csvContent"
BUILDING_KEY = "buildingData"
ANALYSIS_KEY = "analysisResult"
SYSTEMS_KEY = "buildingSystems"
VERIFICATION_KEY = "verificationInfo"
REPORTS_KEY = "reports"


class KeyValueStore(Protocol):
    """Opaque blob storage for JSON-compatible values."""

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """Key-value cache persisted as a single JSON object on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise exceptions.StoreError(f"Corrupt store file {self.path}: {e}") from e
        exceptions.require(
            isinstance(data, dict),
            f"Store file {self.path} must hold a JSON object.",
            exceptions.StoreError,
        )
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get(self, key: str) -> Any:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.info("Stored %r in %s", key, self.path)

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


@dataclass
class AnalysisSession:
    """
    One user's intake state: building metadata and systems, the latest
    ingestion and its summary, and the generated analysis text.

    A new ingestion replaces the previous one outright and clears any
    analysis produced from it.
    """

    building: Optional[BuildingInfo] = None
    systems: Optional[BuildingSystems] = None
    verification: Optional[VerificationInfo] = None
    config: AuditConfig = field(default_factory=default_config)
    csv_text: Optional[str] = None
    result: Optional[IngestResult] = None
    summary: Optional[SummaryPayload] = None
    analysis: Optional[str] = None

    def ingest(self, text: str) -> IngestResult:
        # parse first so a failed ingestion leaves the session untouched
        result = from_text(text, config=self.config.ingest)
        self.csv_text = text
        self.result = result
        self.summary = summarise(
            result.records,
            warnings=result.warnings,
            systems=self.systems,
            config=self.config.summary,
        )
        self.analysis = None
        return result

    def build_prompt(self) -> str:
        building, result = self.building, self.result
        if building is None or result is None:
            raise exceptions.AuditError(
                "Required data is missing. Please ensure all data is entered."
            )
        return prompt.build_analysis_prompt(
            building, averages(result.records), warnings=result.warnings
        )

    def analyse(self, analyzer: prompt.Analyzer) -> str:
        text = self.build_prompt()
        try:
            self.analysis = analyzer(text)
        except Exception as e:
            raise exceptions.AnalysisError(
                f"Failed to analyze energy data: {e}"
            ) from e
        return self.analysis

    def save(self, store: KeyValueStore) -> None:
        """Write every session key; keys this session lacks are removed."""
        values: Dict[str, Any] = {
            CSV_KEY: self.csv_text,
            BUILDING_KEY: _dump(self.building),
            SYSTEMS_KEY: _dump(self.systems),
            VERIFICATION_KEY: _dump(self.verification),
            ANALYSIS_KEY: self.analysis,
        }
        for key, value in values.items():
            if value is None:
                store.delete(key)
            else:
                store.set(key, value)

    @classmethod
    def load(
        cls, store: KeyValueStore, *, config: Optional[AuditConfig] = None
    ) -> "AnalysisSession":
        """Rebuild a session from a store; the CSV is re-ingested, not cached."""
        sess = cls(
            building=_load_model(store, BUILDING_KEY, BuildingInfo),
            systems=_load_model(store, SYSTEMS_KEY, BuildingSystems),
            verification=_load_model(store, VERIFICATION_KEY, VerificationInfo),
            config=config or default_config(),
        )
        csv_text = store.get(CSV_KEY)
        if csv_text is not None:
            sess.ingest(csv_text)
        sess.analysis = store.get(ANALYSIS_KEY)
        return sess

    def to_report(
        self, *, report_id: Optional[str] = None, date: Optional[str] = None
    ) -> Report:
        building, csv_text, analysis = self.building, self.csv_text, self.analysis
        if analysis is None:
            raise exceptions.AuditError(
                "No analysis data available. Please run the analysis first."
            )
        if building is None or csv_text is None:
            raise exceptions.AuditError(
                "Required data is missing. Please ensure all data is entered."
            )
        return Report(
            id=report_id or str(int(time.time() * 1000)),
            title=f"Energy Audit Report - {building.name}",
            date=date or _date.today().isoformat(),
            content=csv_text,
            analysis_result=analysis,
            building_data=building,
            building_systems=self.systems,
            verification_info=self.verification,
        )


def _dump(model: Optional[BaseModel]) -> Optional[Dict[str, Any]]:
    return model.model_dump(by_alias=True) if model is not None else None


def _load_model(store: KeyValueStore, key: str, model: Type[M]) -> Optional[M]:
    raw = store.get(key)
    if raw is None:
        return None
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise exceptions.StoreError(f"Invalid stored {key}: {e}") from e


class ReportStore:
    """Saved reports, kept as a JSON list under a single store key."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def list(self) -> List[Report]:
        raw = self.store.get(REPORTS_KEY) or []
        try:
            return [Report.model_validate(r) for r in raw]
        except ValidationError as e:
            raise exceptions.StoreError(f"Invalid stored report: {e}") from e

    def _save(self, reports: List[Report]) -> None:
        self.store.set(REPORTS_KEY, [r.model_dump(by_alias=True) for r in reports])

    def add(self, report: Report) -> None:
        reports = [r for r in self.list() if r.id != report.id]
        reports.append(report)
        self._save(reports)

    def get(self, report_id: str) -> Optional[Report]:
        return next((r for r in self.list() if r.id == report_id), None)

    def delete(self, report_id: str) -> None:
        self._save([r for r in self.list() if r.id != report_id])
