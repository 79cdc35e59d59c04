"""
FARS Error Taxonomy

Every failure raised by the package derives from ``FarsError`` and from the
matching built-in exception, so callers may catch either.

Package Location: src/fars/errors.py
"""


class FarsError(Exception):
    """Base class for all package errors."""


class InvalidYear(FarsError, ValueError):
    """Year value cannot be coerced to an integer."""


class FileNotFound(FarsError, FileNotFoundError):
    """Source accident file does not exist."""


class ParseFailure(FarsError, ValueError):
    """Source file exists but its contents cannot be parsed."""


class InvalidStateNumber(FarsError, ValueError):
    """State code is not present in the loaded year's data."""


class AggregationError(FarsError, ValueError):
    """No valid year tables were available to summarize."""
