"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: one state's accident DataFrame with sentinel coordinates already
replaced by NaN.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map extent:
    The geo axes are clipped to the bounding box of the non-missing
    LONGITUD / LATITUDE values, padded by ``_PAD_DEG`` on each side so that
    a single accident still gets a visible window.  When an axis has no
    valid values at all, that axis is left unconstrained.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import bounding_box

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_PAD_DEG: float = 0.5

_MARKER_STYLE: Dict[str, Any] = {'color': 'black', 'size': 3, 'opacity': 0.7}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_accidents: pd.DataFrame,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Build a point map of accident locations.

    Each accident with both coordinates present becomes one marker at
    ``(LONGITUD, LATITUDE)``.  State borders are drawn underneath.

    Args:
        df_accidents: DataFrame with float columns ``LONGITUD`` and
            ``LATITUDE`` (NaN for unknown).  Must not be empty.
        title: Optional figure title.

    Returns:
        Plotly Figure with a single ``Scattergeo`` trace.

    Raises:
        ValueError: If *df_accidents* is empty.
    """
    if df_accidents.empty:
        raise ValueError("df_accidents is empty; nothing to plot")

    located = df_accidents.dropna(subset=['LONGITUD', 'LATITUDE'])

    fig = go.Figure(
        go.Scattergeo(
            lon=located['LONGITUD'],
            lat=located['LATITUDE'],
            mode='markers',
            marker=_MARKER_STYLE,
            name='Accidents',
            hovertemplate='lon %{lon:.4f}<br>lat %{lat:.4f}<extra></extra>',
        )
    )

    fig.update_layout(
        title=title,
        geo=_geo_layout(bounding_box(df_accidents)),
        showlegend=False,
        margin=dict(l=10, r=10, t=50 if title else 10, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _geo_layout(box: Dict[str, Any]) -> Dict[str, Any]:
    """Base-map settings, clipped to *box* where an axis range is known."""
    geo: Dict[str, Any] = dict(
        scope='north america',
        projection=dict(type='mercator'),
        showland=True,
        landcolor='rgb(243, 243, 243)',
        showsubunits=True,
        subunitcolor='rgb(120, 120, 120)',
        showcountries=True,
        countrycolor='rgb(80, 80, 80)',
        showlakes=False,
    )
    if box['lon'] is not None:
        lo, hi = box['lon']
        geo['lonaxis'] = dict(range=[lo - _PAD_DEG, hi + _PAD_DEG])
    if box['lat'] is not None:
        lo, hi = box['lat']
        geo['lataxis'] = dict(range=[lo - _PAD_DEG, hi + _PAD_DEG])
    return geo
