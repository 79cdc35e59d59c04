"""
FARS Map Generator (Imperative Shell)

Thin orchestration layer: loads one year through ``data/reader.py``,
selects and cleans one state's accidents via the functional core, builds
the figure with ``plotting/state_map.py``, and optionally writes HTML.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import map_state

    fig = map_state(1, 2013, data_dir="extdata", output="alabama_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import (
    LOCATION_COLUMNS,
    clean_coordinates,
    select_state,
)
from ..data import reader
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)


def build_state_map(
    data: pd.DataFrame,
    state_num: Union[int, str],
    title: Optional[str] = None,
) -> Optional[go.Figure]:
    """
    Select one state's accidents from a loaded year and build its map.

    Args:
        data: Full accident DataFrame for one year.
        state_num: FARS state code.
        title: Optional figure title.

    Returns:
        The map figure, or ``None`` when the state has no accidents.

    Raises:
        InvalidStateNumber: If *state_num* does not occur in *data*.
    """
    data_sub = select_state(data, state_num)
    if data_sub.empty:
        log.info("no accidents to plot", extra={"state": str(state_num)})
        return None

    return plot_state_map(clean_coordinates(data_sub), title=title)


def map_state(
    state_num: Union[int, str],
    year: Union[int, str],
    data_dir: Optional[reader.PathLike] = None,
    output: Optional[reader.PathLike] = None,
    show: bool = False,
) -> Optional[go.Figure]:
    """
    Map the accident locations of one state for one year.

    Load errors are not caught here; they propagate to the caller.

    Args:
        state_num: FARS state code as int or numeric string.
        year: Year as int or numeric string.
        data_dir: Directory holding the accident files.
        output: Optional ``.html`` path to write the figure to.
        show: When ``True``, open the figure in the default renderer.

    Returns:
        The Plotly figure, or ``None`` when there is nothing to plot.

    Raises:
        InvalidYear, FileNotFound, ParseFailure: From loading the year.
        InvalidStateNumber: If *state_num* is not in that year's data.
    """
    year_int = reader.coerce_year(year)
    filename = reader.filename_for(year_int)
    data = reader.read(reader.resolve_path(filename, data_dir))
    reader.require_columns(data, LOCATION_COLUMNS, filename)

    fig = build_state_map(
        data, state_num, title=f"FARS accidents – state {state_num}, {year_int}"
    )
    if fig is None:
        return None

    if output is not None:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
    if show:
        fig.show()
    return fig
