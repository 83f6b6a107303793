from __future__ import annotations
from typing import Final, Dict, Tuple

DATE_FIELD: Final[str] = "date"

# Canonical schema, in template column order
FIELDS: Final[list[str]] = [
    "date",
    "electricity",
    "gas",
    "water",
    "hvac",
    "lighting",
    "equipment",
    "peakDemand",
    "occupancy",
    "temperature",
    "humidity",
    "renewableEnergy",
    "energyCost",
]
NUMERIC_FIELDS: Final[list[str]] = [f for f in FIELDS if f != DATE_FIELD]

# Serialised (camelCase) name -> python attribute name
ATTRS: Dict[str, str] = {
    "date": "date",
    "electricity": "electricity",
    "gas": "gas",
    "water": "water",
    "hvac": "hvac",
    "lighting": "lighting",
    "equipment": "equipment",
    "peakDemand": "peak_demand",
    "occupancy": "occupancy",
    "temperature": "temperature",
    "humidity": "humidity",
    "renewableEnergy": "renewable_energy",
    "energyCost": "energy_cost",
}

# Header substrings accepted for each field (matched lower-cased)
SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "date": ("date",),
    "electricity": ("electricity", "electric"),
    "gas": ("gas", "natural gas"),
    "water": ("water",),
    "hvac": ("hvac",),
    "lighting": ("lighting",),
    "equipment": ("equipment",),
    "peakDemand": ("peak demand", "demand"),
    "occupancy": ("occupancy",),
    "temperature": ("temperature", "temp"),
    "humidity": ("humidity",),
    "renewableEnergy": ("renewable",),
    "energyCost": ("cost", "energy cost"),
}

# Labels used by the downloadable template
TEMPLATE_LABELS: Dict[str, str] = {
    "date": "Date",
    "electricity": "Electricity (kWh)",
    "gas": "Gas (therms)",
    "water": "Water (gallons)",
    "hvac": "HVAC (kWh)",
    "lighting": "Lighting (kWh)",
    "equipment": "Equipment (kWh)",
    "peakDemand": "Peak Demand (kW)",
    "occupancy": "Occupancy (%)",
    "temperature": "Outside Temperature (F)",
    "humidity": "Humidity (%)",
    "renewableEnergy": "Renewable Energy (kWh)",
    "energyCost": "Energy Cost ($)",
}
TEMPLATE_HEADER: Final[str] = ",".join(TEMPLATE_LABELS[f] for f in FIELDS)

DEFAULT_DELIMITER: Final[str] = ","
ROW_LABEL_FMT: Final[str] = "Row {n}"

# Areas shown in the usage-by-area chart
AREA_FIELDS: Dict[str, str] = {
    "HVAC": "hvac",
    "Lighting": "lighting",
    "Equipment": "equipment",
}
OTHER_AREA: Final[str] = "Other"
