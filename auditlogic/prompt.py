from __future__ import annotations
from typing import Any, Iterable, Mapping, Protocol

from .types import AggregateSummary, BuildingInfo, ParseWarning

NA = "N/A"

ANALYSIS_SECTIONS = [
    "Energy consumption patterns and trends",
    "Peak demand analysis",
    "System performance evaluation",
    "Cost analysis and potential savings",
    "Environmental impact assessment",
    "Recommendations for optimization",
]


class Analyzer(Protocol):
    """Text-completion backend: prompt in, narrative analysis out."""

    def __call__(self, prompt: str) -> str: ...


def _or_na(value: Any) -> str:
    if value is None or value == "":
        return NA
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _building(building: BuildingInfo | Mapping[str, Any]) -> BuildingInfo:
    if isinstance(building, BuildingInfo):
        return building
    return BuildingInfo.model_validate(building)


def build_analysis_prompt(
    building: BuildingInfo | Mapping[str, Any],
    averages: AggregateSummary,
    *,
    warnings: Iterable[ParseWarning] = (),
) -> str:
    """
    Render the natural-language analysis request.

    Averages are shown to two decimals. Recovered cells are listed under
    "Data quality notes" so the narrative does not hide substituted zeros.
    """
    b = _building(building)
    a = averages
    lines = [
        f"Analyze the energy consumption patterns for building {b.name}, "
        "a comprehensive energy audit analysis:",
        "",
        "Building Information:",
        f"- Name: {b.name}",
        f"- Type: {_or_na(b.type)}",
        f"- Size: {_or_na(b.size)} sq ft",
        f"- Location: {_or_na(b.location)}",
        f"- Year Built: {_or_na(b.year_built)}",
        f"- Number of Floors: {_or_na(b.number_of_floors)}",
        f"- Occupancy: {_or_na(b.occupancy_percentage)}%",
        "",
        "Energy Consumption Averages:",
        f"- Average Electricity Usage: {a['electricity']:.2f} kWh",
        f"- Average Gas Usage: {a['gas']:.2f} therms",
        f"- Average Water Usage: {a['water']:.2f} gallons",
        f"- Average Peak Demand: {a['peakDemand']:.2f} kW",
        f"- Average Occupancy: {a['occupancy']:.2f}%",
        f"- Average Energy Cost: ${a['energyCost']:.2f}",
        f"- Renewable Energy Generation: {a['renewableEnergy']:.2f} kWh",
        "",
        "System-Specific Usage:",
        f"- HVAC: {a['hvac']:.2f} kWh",
        f"- Lighting: {a['lighting']:.2f} kWh",
        f"- Equipment: {a['equipment']:.2f} kWh",
        "",
        "Environmental Conditions:",
        f"- Average Temperature: {a['temperature']:.2f}°F",
        f"- Average Humidity: {a['humidity']:.2f}%",
    ]

    notes = [w.message for w in warnings]
    if notes:
        lines += ["", "Data quality notes (values substituted with 0):"]
        lines += [f"- {n}" for n in notes]

    lines += ["", "Please provide a detailed analysis including:"]
    lines += [f"{i}. {s}" for i, s in enumerate(ANALYSIS_SECTIONS, start=1)]
    return "\n".join(lines) + "\n"
