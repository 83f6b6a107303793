"""Aggregation: per-field means, totals and usage by area."""

import pytest

import auditlogic as al
from auditlogic import canon
from auditlogic.types import BuildingSystems, TimeSeriesRecord


def test_averages_equal_single_row(one_row_csv):
    res = al.ingest.from_text(one_row_csv)
    avg = al.summary.averages(res.records)
    rec = res.records[0]
    assert set(avg) == set(canon.NUMERIC_FIELDS)
    for name in canon.NUMERIC_FIELDS:
        assert avg[name] == rec.value(name)
    assert avg["energyCost"] == 125.50


def test_averages_are_sum_over_count(three_row_csv):
    records = al.ingest.from_text(three_row_csv).records
    avg = al.summary.averages(records)
    for name in canon.NUMERIC_FIELDS:
        expected = sum(r.value(name) for r in records) / len(records)
        assert avg[name] == pytest.approx(expected)
    assert avg["electricity"] == pytest.approx(900.0)


def test_empty_series_is_all_zero():
    avg = al.summary.averages([])
    assert avg == {name: 0.0 for name in canon.NUMERIC_FIELDS}
    usage = al.summary.usage_by_area([], include_other=True)
    assert [u["usage"] for u in usage] == [0.0, 0.0, 0.0, 0.0]


def test_usage_by_area_without_other(one_row_csv):
    records = al.ingest.from_text(one_row_csv).records
    usage = al.summary.usage_by_area(records)
    assert usage == [
        {"area": "HVAC", "usage": 400.0},
        {"area": "Lighting", "usage": 300.0},
        {"area": "Equipment", "usage": 300.0},
    ]


def test_other_bucket_is_remainder():
    rec = TimeSeriesRecord(label="r", electricity=1200, hvac=400, lighting=300, equipment=300)
    usage = al.summary.usage_by_area([rec], include_other=True)
    assert usage[-1] == {"area": "Other", "usage": 200.0}


def test_other_bucket_clamps_to_zero():
    rec = TimeSeriesRecord(label="r", electricity=500, hvac=400, lighting=300, equipment=300)
    usage = al.summary.usage_by_area([rec], include_other=True)
    assert usage[-1]["area"] == "Other"
    assert usage[-1]["usage"] == 0.0


def test_summarise_payload_structure(three_row_csv):
    res = al.ingest.from_text(three_row_csv)
    payload = al.summary.summarise(res.records, warnings=res.warnings)
    assert payload["meta"] == {
        "rows": 3,
        "start": "2024-01-01",
        "end": "2024-03-01",
        "warnings": 0,
    }
    assert payload["totals"]["electricity"] == pytest.approx(2700.0)
    assert [u["area"] for u in payload["usage_by_area"]] == [
        "HVAC",
        "Lighting",
        "Equipment",
        "Other",
    ]
    series = payload["datasets"]["series"]
    assert [r["label"] for r in series] == ["2024-01-01", "2024-02-01", "2024-03-01"]
    assert "peakDemand" in series[0]


def test_totals_and_averages_come_from_the_frame(three_row_csv):
    records = al.ingest.from_text(three_row_csv).records
    df = al.formats.to_frame(records)
    assert al.summary.totals(records) == pytest.approx(df.sum().to_dict())
    assert al.summary.averages(records) == pytest.approx(df.mean().to_dict())
    assert al.summary.totals([]) == {name: 0.0 for name in canon.NUMERIC_FIELDS}


def test_summarise_lists_recovered_cells(template_header):
    text = f"{template_header}\n2024-01-01,abc,50,5000,400,300,300,150,85,72,45,0,x\n"
    res = al.ingest.from_text(text)
    payload = al.summary.summarise(res.records, warnings=res.warnings)
    assert payload["meta"]["warnings"] == 2
    assert payload["warnings"] == [
        {"field": "electricity", "row": 2, "text": "abc"},
        {"field": "energyCost", "row": 2, "text": "x"},
    ]


def test_system_datasets(three_row_csv, systems):
    bs = BuildingSystems.model_validate(systems)
    records = al.ingest.from_text(three_row_csv).records

    analysis = al.summary.system_analysis(bs)
    assert [a["system"] for a in analysis] == [
        "HVAC System",
        "Lighting System",
        "Building Envelope",
    ]
    assert analysis[0]["efficiency"] == 0.8
    assert analysis[1]["type"] == "LED, T8"
    assert analysis[2]["insulation"] == "Walls: R-13, Roof: R-30"

    perf = al.summary.system_performance(records, bs)
    assert perf == [
        {"label": "2024-01-01", "hvacEfficiency": 0.8, "actualUsage": 400.0},
        {"label": "2024-02-01", "hvacEfficiency": 0.8, "actualUsage": 300.0},
        {"label": "2024-03-01", "hvacEfficiency": 0.8, "actualUsage": 350.0},
    ]

    payload = al.summary.summarise(records, systems=bs)
    assert payload["datasets"]["system_performance"] == perf
    assert "system_analysis" not in al.summary.summarise(records)["datasets"]
