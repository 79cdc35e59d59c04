"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader:  Filename convention, single-file parsing, multi-year loading
- summary: Month-by-year summary orchestration
"""

from .reader import (
    FILENAME_PATTERN,
    filename_for,
    read,
    read_year,
    read_years,
)
from .summary import summarize

__all__ = [
    # Reader
    'FILENAME_PATTERN',
    'filename_for',
    'read',
    'read_year',
    'read_years',
    # Summary
    'summarize',
]
