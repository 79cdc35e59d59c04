"""
FARS - Fatality Analysis Reporting System toolkit

Loads yearly accident census files, summarizes accident counts by month
and year, and maps accident locations for a single state.

Structure:
- data/     : Imperative Shell (file lookup and parsing)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration of data + plotting
"""

__version__ = "0.1.0"

from .errors import (
    FarsError,
    InvalidYear,
    FileNotFound,
    ParseFailure,
    InvalidStateNumber,
    AggregationError,
)
from .data import filename_for, read, read_years, summarize
from .reports import map_state

__all__ = [
    'FarsError',
    'InvalidYear',
    'FileNotFound',
    'ParseFailure',
    'InvalidStateNumber',
    'AggregationError',
    'filename_for',
    'read',
    'read_years',
    'summarize',
    'map_state',
]
