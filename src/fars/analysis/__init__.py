"""
FARS Analysis Package (Functional Core)

Pure DataFrame transformations. No file I/O.

Modules:
- counts:    Monthly accident counts and the month-by-year pivot
- locations: State selection, coordinate sentinel cleaning, extents
"""

from .counts import (
    MONTHS,
    combine_years,
    monthly_counts,
    pivot_monthly,
    summarize_tables,
)
from .locations import (
    select_state,
    clean_coordinates,
    bounding_box,
)

__all__ = [
    # Counts
    'MONTHS',
    'combine_years',
    'monthly_counts',
    'pivot_monthly',
    'summarize_tables',
    # Locations
    'select_state',
    'clean_coordinates',
    'bounding_box',
]
