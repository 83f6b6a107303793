from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypedDict, List, Dict, Mapping, Optional, Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from . import canon


# Header resolution
@dataclass(frozen=True)
class HeaderMap:
    """
    Canonical field -> zero-based column index in the source header.

    `None` marks a field that was not found (lenient mode only).
    `width` is the number of columns in the header row.
    """

    columns: Mapping[str, Optional[int]]
    width: int

    def __post_init__(self):
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    def __getitem__(self, name: str) -> Optional[int]:
        return self.columns[name]

    @property
    def missing(self) -> list[str]:
        return [f for f in canon.FIELDS if self.columns.get(f) is None]


# Recoverable parse results
@dataclass(frozen=True)
class ParseWarning:
    field: str
    row: int  # 1-based, header is row 1
    text: str

    @property
    def message(self) -> str:
        return f"Invalid number for {self.field} in row {self.row}: {self.text!r}, using 0"

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "row": self.row, "text": self.text}


@dataclass(frozen=True)
class Recovered:
    value: float
    warning: Optional[ParseWarning] = None

    @property
    def recovered(self) -> bool:
        return self.warning is not None


# Records
class TimeSeriesRecord(BaseModel):
    """
    One normalised row of consumption data.

    Serialises with camelCase keys (peakDemand, energyCost, ...) for chart
    and storage consumers; python attributes are snake_case.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    label: str
    electricity: float = 0.0
    gas: float = 0.0
    water: float = 0.0
    hvac: float = 0.0
    lighting: float = 0.0
    equipment: float = 0.0
    peak_demand: float = 0.0
    occupancy: float = 0.0
    temperature: float = 0.0
    humidity: float = 0.0
    renewable_energy: float = 0.0
    energy_cost: float = 0.0

    def value(self, name: str) -> float:
        """Numeric value by canonical name, e.g. 'peakDemand'."""
        return getattr(self, canon.ATTRS[name])


@dataclass
class RowResult:
    record: TimeSeriesRecord
    warnings: List[ParseWarning] = field(default_factory=list)


@dataclass
class IngestResult:
    header_map: HeaderMap
    records: List[TimeSeriesRecord]
    warnings: List[ParseWarning] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


# Aggregates
AggregateSummary = Dict[str, float]  # canonical numeric field -> mean


class AreaUsage(TypedDict):
    area: str
    usage: float


UsageByArea = List[AreaUsage]


class SummaryMeta(TypedDict):
    rows: int
    start: str
    end: str
    warnings: int


class SummaryDatasets(TypedDict, total=False):
    series: List[Dict[str, float | str]]
    # present when building systems were entered
    system_analysis: List[Dict[str, Any]]
    system_performance: List[Dict[str, float | str]]


class SummaryPayload(TypedDict):
    meta: SummaryMeta
    averages: AggregateSummary
    totals: Dict[str, float]
    usage_by_area: UsageByArea
    warnings: List[Dict[str, Any]]  # recovered cells: field, row, text
    datasets: SummaryDatasets


class CamelModel(BaseModel):
    """Intake models; serialised with camelCase keys for the stores."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Building metadata entered alongside the CSV
class BuildingInfo(CamelModel):
    name: str
    type: Optional[str] = None
    size: Optional[float] = None  # sq ft
    location: Optional[str] = None
    year_built: Optional[int] = None
    number_of_floors: Optional[int] = None
    occupancy_percentage: Optional[float] = None


class HvacSystem(CamelModel):
    type: str
    age: float  # years
    efficiency: float
    refrigerant_type: str = ""
    maintenance_schedule: str = ""


class LightingSystem(CamelModel):
    types: List[str] = []
    control_systems: List[str] = []
    operating_schedule: str = ""


class InsulationRValues(CamelModel):
    walls: float = 0.0
    roof: float = 0.0
    foundation: float = 0.0


class BuildingEnvelope(CamelModel):
    wall_construction: str = ""
    roof_type: str = ""
    window_types: List[str] = []
    insulation_r_values: InsulationRValues = InsulationRValues()


class BuildingSystems(CamelModel):
    hvac_system: HvacSystem
    lighting_system: LightingSystem = LightingSystem()
    building_envelope: BuildingEnvelope = BuildingEnvelope()


class VerificationInfo(CamelModel):
    verifier_name: str
    verifier_credentials: str = ""
    verifier_license_number: str = ""
    verification_date: str = ""
    signature_url: Optional[str] = None  # uploaded signature image


class Report(CamelModel):
    id: str
    title: str
    date: str
    content: str  # raw CSV text
    analysis_result: str
    building_data: Optional[BuildingInfo] = None
    building_systems: Optional[BuildingSystems] = None
    verification_info: Optional[VerificationInfo] = None
