from __future__ import annotations

import pytest

from algoevo.core.errors import DataQualityError, UnknownRevisionError
from algoevo.core.revisions import (
    REVISION_ORDER,
    REVISIONS,
    classify_period_string,
    classify_year,
    next_revision,
    revision_for_technology,
    revision_index,
)
from tests.record_helpers import make_tech


def test_classify_year_is_total_and_monotonic():
    previous = -1
    for year in range(1990, 2031):
        key = classify_year(year)
        assert key in REVISION_ORDER
        idx = revision_index(key)
        assert idx >= previous
        previous = idx


@pytest.mark.parametrize(
    "year, expected",
    [
        (1990, "rev1"),
        (2015, "rev1"),
        (2016, "rev2"),
        (2020, "rev2"),
        (2021, "rev3"),
        (2022, "rev3"),
        (2023, "rev4"),
        (2024, "rev5"),
        (2025, "rev5"),
        (2030, "rev5"),
    ],
)
def test_classify_year_boundaries(year, expected):
    assert classify_year(year) == expected


def test_revision_table_is_contiguous():
    ranges = [REVISIONS[key].years for key in REVISION_ORDER]
    for (_, prev_end), (start, _) in zip(ranges, ranges[1:]):
        assert start == prev_end + 1


@pytest.mark.parametrize(
    "period, expected",
    [("2015-2017", "rev1"), ("2020+", "rev2"), ("2020-2022", "rev2"), ("с 2023 года", "rev4")],
)
def test_classify_period_string_uses_first_year(period, expected):
    assert classify_period_string(period) == expected


@pytest.mark.parametrize("period", ["unknown", "", "20-22"])
def test_classify_period_string_without_year_raises(period):
    with pytest.raises(DataQualityError) as excinfo:
        classify_period_string(period, record_id="case-x")
    assert excinfo.value.record_id == "case-x"
    assert excinfo.value.value == period


def test_technology_bucketed_by_peak_then_start():
    with_peak = make_tech("rf", "Random Forest", start=2001, periods={"start": 2001, "peak": 2015})
    assert revision_for_technology(with_peak) == "rev1"
    without_peak = make_tech("tr", "Transformer", periods={"start": 2021})
    assert revision_for_technology(without_peak) == "rev3"


def test_next_revision_and_unknown_key():
    assert next_revision("rev1") == "rev2"
    assert next_revision("rev5") is None
    with pytest.raises(UnknownRevisionError):
        next_revision("rev9")
