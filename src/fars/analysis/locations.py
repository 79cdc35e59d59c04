"""
FARS Accident Location Transformations (Functional Core)

Pure functions only. No file I/O, no side effects.

Package Location: src/fars/analysis/locations.py

Coordinate sentinels:
    FARS encodes unknown positions with out-of-range values (e.g. 999.9999
    for LONGITUD, 99.9999 for LATITUDE).  Any LONGITUD above 900 or
    LATITUDE above 90 is treated as missing and replaced with NaN after
    the state filter, never during parsing.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..errors import InvalidStateNumber, ParseFailure
from ..utils.convert import as_integer

# ---------------------------------------------------------------------------
# Sentinel thresholds
# ---------------------------------------------------------------------------
LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0

LOCATION_COLUMNS = ["STATE", "LONGITUD", "LATITUDE"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def coerce_state(state_num: Union[int, str]) -> int:
    """Coerce a state code to ``int`` or raise ``InvalidStateNumber``."""
    return as_integer(state_num, InvalidStateNumber, "STATE number")


def select_state(data: pd.DataFrame, state_num: Union[int, str]) -> pd.DataFrame:
    """
    Return the accidents recorded for one state.

    Args:
        data: Full accident DataFrame for a year (needs ``STATE``).
        state_num: FARS state code as int or numeric string.

    Returns:
        Copy of the matching rows.  May be empty.

    Raises:
        InvalidStateNumber: If the code is not coercible or does not occur
            among the ``STATE`` values of *data*.
    """
    state = coerce_state(state_num)
    if state not in set(data["STATE"].dropna().unique()):
        raise InvalidStateNumber(f"invalid STATE number: {state}")
    return data.loc[data["STATE"] == state].copy()


def clean_coordinates(data: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Returns:
        New DataFrame; *data* is left untouched.

    Raises:
        ParseFailure: If a coordinate column holds non-numeric values.
    """
    lon = _numeric_column(data, "LONGITUD")
    lat = _numeric_column(data, "LATITUDE")
    return data.assign(
        LONGITUD=lon.mask(lon > LONGITUDE_SENTINEL, np.nan),
        LATITUDE=lat.mask(lat > LATITUDE_SENTINEL, np.nan),
    )


def bounding_box(data: pd.DataFrame) -> Dict[str, Optional[Tuple[float, float]]]:
    """
    Compute the coordinate extent of the non-missing positions.

    Longitude and latitude ranges are taken independently, each ignoring
    its own NaNs.

    Returns:
        ``{'lon': (min, max) or None, 'lat': (min, max) or None}``; an axis
        whose values are all missing maps to ``None``.
    """
    return {
        'lon': _finite_range(data["LONGITUD"]),
        'lat': _finite_range(data["LATITUDE"]),
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _finite_range(values: pd.Series) -> Optional[Tuple[float, float]]:
    valid = values.dropna()
    if valid.empty:
        return None
    return float(valid.min()), float(valid.max())


def _numeric_column(data: pd.DataFrame, column: str) -> pd.Series:
    try:
        return pd.to_numeric(data[column], errors="raise").astype(float)
    except (TypeError, ValueError) as exc:
        raise ParseFailure(f"column {column} is not numeric: {exc}") from exc
