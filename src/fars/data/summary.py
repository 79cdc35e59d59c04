"""
FARS Year Summary (Imperative Shell)

Thin orchestration: reads the requested years through ``reader`` and hands
the per-year tables to the pure aggregation in ``analysis/counts.py``.

Package Location: src/fars/data/summary.py
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

import pandas as pd

from .reader import PathLike, read_years
from ..analysis.counts import summarize_tables


def summarize(
    years: Iterable[Union[int, str]],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that fail to load are skipped with a warning (see
    ``read_years``).

    Args:
        years: Years as ints or numeric strings, e.g. ``[2013, 2014]``.
        data_dir: Directory holding the accident files.

    Returns:
        DataFrame indexed by ``MONTH`` (1..12) with one column per loaded
        year; values are accident counts, NaN where a month has none.

    Raises:
        AggregationError: If none of *years* could be loaded.
    """
    return summarize_tables(read_years(years, data_dir=data_dir))
