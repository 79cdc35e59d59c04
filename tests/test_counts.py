import logging

import pandas as pd
import pytest

from fars.analysis.counts import (
    MONTHS,
    combine_years,
    monthly_counts,
    pivot_monthly,
)
from fars.data.summary import summarize
from fars.errors import AggregationError


# ---------------------------------------------------------------------------
# Functional core
# ---------------------------------------------------------------------------

def _year_table(year, months):
    return pd.DataFrame({"MONTH": months, "year": year})


def test_combine_years_skips_absent_slots():
    combined = combine_years([_year_table(2013, [1, 2]), None, _year_table(2014, [3])])
    assert len(combined) == 3
    assert sorted(combined["year"].unique()) == [2013, 2014]


def test_combine_years_all_absent():
    with pytest.raises(AggregationError):
        combine_years([None, None])


def test_combine_years_empty():
    with pytest.raises(AggregationError):
        combine_years([])


def test_monthly_counts_long_format():
    counts = monthly_counts(_year_table(2013, [1, 1, 4]))
    assert list(counts.columns) == ["year", "MONTH", "n"]
    assert counts.set_index("MONTH")["n"].to_dict() == {1: 2, 4: 1}


def test_pivot_monthly_shape_and_missing():
    counts = pd.DataFrame({
        "year":  [2014, 2013, 2013],
        "MONTH": [2, 1, 2],
        "n":     [5, 3, 4],
    })
    wide = pivot_monthly(counts)

    assert wide.index.tolist() == MONTHS
    assert wide.columns.tolist() == [2013, 2014]
    assert wide.index.name == "MONTH"
    assert wide.loc[1, 2013] == 3
    assert wide.loc[2, 2014] == 5
    # absent combinations stay missing, not zero
    assert pd.isna(wide.loc[1, 2014])
    assert wide.loc[12].isna().all()


# ---------------------------------------------------------------------------
# summarize (reads files)
# ---------------------------------------------------------------------------

def test_summarize_two_years(data_dir):
    table = summarize([2013, 2014], data_dir=data_dir)

    assert table.index.tolist() == list(range(1, 13))
    assert table.columns.tolist() == [2013, 2014]
    assert table.loc[1, 2013] == 2
    assert table.loc[2, 2013] == 1
    assert table.loc[3, 2013] == 1
    assert table.loc[12, 2013] == 1
    assert table.loc[1, 2014] == 2
    assert table.loc[5, 2014] == 1
    assert pd.isna(table.loc[5, 2013])
    assert table[2013].sum() == 5
    assert table[2014].sum() == 3


def test_summarize_skips_invalid_year(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        table = summarize([2013, 1999], data_dir=data_dir)
    assert table.columns.tolist() == [2013]
    assert "invalid year: 1999" in caplog.messages


def test_summarize_only_invalid_years(data_dir):
    with pytest.raises(AggregationError):
        summarize([1999, "abc"], data_dir=data_dir)


def test_summarize_duplicate_year_adds_counts(data_dir):
    table = summarize([2014, 2014], data_dir=data_dir)
    assert table.columns.tolist() == [2014]
    assert table.loc[1, 2014] == 4
