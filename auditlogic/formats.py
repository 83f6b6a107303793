from __future__ import annotations
from typing import Sequence

import numpy as np
import pandas as pd

from . import canon
from .types import BuildingSystems, TimeSeriesRecord

LABEL_COL = "label"

# Example rows written under the template header
TEMPLATE_ROWS: list[list[str]] = [
    ["2023-01-01", "1000", "50", "5000", "400", "300", "300", "150", "85", "72", "45", "0", "125.50"],
    ["2023-01-02", "950", "48", "4800", "380", "290", "280", "145", "82", "70", "47", "10", "119.75"],
    ["2023-01-03", "1100", "52", "5200", "420", "330", "350", "160", "88", "68", "50", "12", "138.10"],
    ["2023-01-04", "980", "49", "4900", "390", "295", "295", "148", "84", "71", "44", "8", "123.00"],
    ["2023-01-05", "1050", "51", "5100", "410", "315", "325", "155", "86", "74", "42", "15", "131.80"],
    ["2023-01-06", "900", "47", "4700", "360", "270", "270", "140", "60", "75", "40", "20", "112.40"],
    ["2023-01-07", "850", "45", "4500", "340", "255", "255", "135", "55", "73", "41", "18", "106.25"],
]


def to_records(records: Sequence[TimeSeriesRecord]) -> list[dict[str, float | str]]:
    """Flat, ordered chart records with camelCase keys."""
    return [rec.model_dump(by_alias=True) for rec in records]


def to_frame(records: Sequence[TimeSeriesRecord]) -> pd.DataFrame:
    """
    Tabular view of a series for analysis/plotting.

      - index: 'label' (file order preserved, duplicates allowed)
      - columns: canonical numeric fields (camelCase), float64
    """
    if not records:
        idx = pd.Index([], name=LABEL_COL, dtype=object)
        return pd.DataFrame(
            np.empty((0, len(canon.NUMERIC_FIELDS))),
            columns=canon.NUMERIC_FIELDS,
            index=idx,
        )

    df = pd.DataFrame.from_records(to_records(records)).set_index(LABEL_COL)
    return df[canon.NUMERIC_FIELDS].astype(np.float64)


def template_csv(rows: Sequence[Sequence[str]] = TEMPLATE_ROWS) -> str:
    """The downloadable CSV template: canonical header plus example rows."""
    lines = [canon.TEMPLATE_HEADER]
    lines.extend(canon.DEFAULT_DELIMITER.join(r) for r in rows)
    return "\n".join(lines) + "\n"


def building_systems_lines(systems: BuildingSystems) -> list[str]:
    """Indented plain-text block describing the building systems for reports."""
    hvac = systems.hvac_system
    lighting = systems.lighting_system
    env = systems.building_envelope
    r = env.insulation_r_values
    return [
        "HVAC System:",
        f"  • Type: {hvac.type}",
        f"  • Age: {hvac.age:g} years",
        f"  • Efficiency: {hvac.efficiency:g}",
        f"  • Refrigerant: {hvac.refrigerant_type}",
        f"  • Maintenance Schedule: {hvac.maintenance_schedule}",
        "",
        "Lighting System:",
        f"  • Types: {', '.join(lighting.types)}",
        f"  • Control Systems: {', '.join(lighting.control_systems)}",
        f"  • Operating Schedule: {lighting.operating_schedule}",
        "",
        "Building Envelope:",
        f"  • Wall Construction: {env.wall_construction}",
        f"  • Roof Type: {env.roof_type}",
        f"  • Window Types: {', '.join(env.window_types)}",
        "  • Insulation R-Values:",
        f"    - Walls: {r.walls:g}",
        f"    - Roof: {r.roof:g}",
        f"    - Foundation: {r.foundation:g}",
    ]
