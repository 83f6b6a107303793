from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, cast

from . import canon, formats
from .config import SummaryConfig
from .types import (
    AggregateSummary,
    AreaUsage,
    BuildingSystems,
    ParseWarning,
    SummaryPayload,
    TimeSeriesRecord,
    UsageByArea,
)

# Rated efficiency shown for systems the intake form does not rate
DEFAULT_LIGHTING_EFFICIENCY = 0.9
DEFAULT_ENVELOPE_EFFICIENCY = 0.85


def totals(records: Sequence[TimeSeriesRecord]) -> dict[str, float]:
    sums = formats.to_frame(records).sum()
    return {str(k): float(v) for k, v in sums.to_dict().items()}


def averages(records: Sequence[TimeSeriesRecord]) -> AggregateSummary:
    """Arithmetic mean of every numeric field; all zeros for an empty series."""
    means = formats.to_frame(records).mean().fillna(0.0)
    return {str(k): float(v) for k, v in means.to_dict().items()}


def usage_by_area(
    data: Sequence[TimeSeriesRecord] | Mapping[str, float],
    *,
    include_other: bool = False,
) -> UsageByArea:
    """
    Mean usage for HVAC, Lighting and Equipment, plus an optional "Other"
    remainder of electricity that is clamped at 0.

    Accepts either the records or a precomputed averages mapping.
    """
    means = data if isinstance(data, Mapping) else averages(data)
    out: UsageByArea = [
        AreaUsage(area=area, usage=float(means[name]))
        for area, name in canon.AREA_FIELDS.items()
    ]
    if include_other:
        other = means["electricity"] - sum(means[n] for n in canon.AREA_FIELDS.values())
        out.append(AreaUsage(area=canon.OTHER_AREA, usage=max(0.0, other)))
    return out


def system_analysis(systems: BuildingSystems) -> List[Dict[str, Any]]:
    """One row per building system for the systems overview chart/table."""
    hvac = systems.hvac_system
    lighting = systems.lighting_system
    env = systems.building_envelope
    r = env.insulation_r_values
    return [
        {
            "system": "HVAC System",
            "efficiency": hvac.efficiency,
            "age": hvac.age,
            "type": hvac.type,
            "schedule": hvac.maintenance_schedule,
        },
        {
            "system": "Lighting System",
            "efficiency": DEFAULT_LIGHTING_EFFICIENCY,
            "type": ", ".join(lighting.types),
            "schedule": lighting.operating_schedule,
        },
        {
            "system": "Building Envelope",
            "efficiency": DEFAULT_ENVELOPE_EFFICIENCY,
            "type": f"{env.wall_construction}, {env.roof_type}",
            "insulation": f"Walls: R-{r.walls:g}, Roof: R-{r.roof:g}",
        },
    ]


def system_performance(
    records: Sequence[TimeSeriesRecord], systems: BuildingSystems
) -> List[Dict[str, float | str]]:
    """Per-row HVAC usage against the HVAC system's rated efficiency."""
    rated = systems.hvac_system.efficiency
    df = formats.to_frame(records)
    return [
        {"label": str(label), "hvacEfficiency": rated, "actualUsage": float(usage)}
        for label, usage in df["hvac"].items()
    ]


def summarise(
    records: Sequence[TimeSeriesRecord],
    *,
    warnings: Iterable[ParseWarning] = (),
    systems: Optional[BuildingSystems] = None,
    config: Optional[SummaryConfig] = None,
) -> SummaryPayload:
    cfg = config or SummaryConfig()
    means = averages(records)
    recovered = [w.to_dict() for w in warnings]

    datasets: Dict[str, Any] = {"series": formats.to_records(records)}
    if systems is not None:
        datasets["system_analysis"] = system_analysis(systems)
        datasets["system_performance"] = system_performance(records, systems)

    payload: SummaryPayload = cast(
        SummaryPayload,
        {
            "meta": {
                "rows": len(records),
                "start": records[0].label if records else "",
                "end": records[-1].label if records else "",
                "warnings": len(recovered),
            },
            "averages": means,
            "totals": totals(records),
            "usage_by_area": usage_by_area(means, include_other=cfg.include_other),
            "warnings": recovered,
            "datasets": datasets,
        },
    )
    return payload
