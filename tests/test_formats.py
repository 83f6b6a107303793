"""Chart records, DataFrame view and the CSV template."""

import pandas as pd
import pandas.testing as pdt

import auditlogic as al
from auditlogic import canon
from auditlogic.types import BuildingSystems


def test_to_records_uses_camel_case_and_keeps_order(three_row_csv):
    records = al.ingest.from_text(three_row_csv).records
    out = al.formats.to_records(records)
    assert [r["label"] for r in out] == ["2024-01-01", "2024-02-01", "2024-03-01"]
    assert set(out[0]) == {"label", *canon.NUMERIC_FIELDS}
    assert out[0]["energyCost"] == 125.50


def test_to_frame(three_row_csv):
    records = al.ingest.from_text(three_row_csv).records
    df = al.formats.to_frame(records)
    assert df.index.name == "label"
    assert list(df.columns) == canon.NUMERIC_FIELDS
    assert (df.dtypes == "float64").all()
    pdt.assert_series_equal(
        df["electricity"],
        pd.Series(
            [1000.0, 800.0, 900.0],
            index=pd.Index(["2024-01-01", "2024-02-01", "2024-03-01"], name="label"),
            name="electricity",
        ),
    )
    # frame means agree with the aggregator
    avg = al.summary.averages(records)
    for name in canon.NUMERIC_FIELDS:
        assert abs(df[name].mean() - avg[name]) < 1e-9


def test_to_frame_empty():
    df = al.formats.to_frame([])
    assert df.empty
    assert list(df.columns) == canon.NUMERIC_FIELDS


def test_template_round_trips_through_ingest():
    text = al.formats.template_csv()
    assert text.splitlines()[0] == canon.TEMPLATE_HEADER
    res = al.ingest.from_text(text)
    assert len(res) == len(al.formats.TEMPLATE_ROWS)
    assert res.warnings == []
    assert res.records[0].electricity == 1000


def test_building_systems_lines(systems):
    lines = al.formats.building_systems_lines(BuildingSystems.model_validate(systems))
    assert lines[0] == "HVAC System:"
    assert "  • Age: 12 years" in lines
    assert "  • Types: LED, T8" in lines
    assert "    - Foundation: 10" in lines
