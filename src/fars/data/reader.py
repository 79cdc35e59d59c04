"""
FARS File Reader (Imperative Shell)

Locates and parses yearly FARS accident files into DataFrames.

Package Location: src/fars/data/reader.py

File convention:
    One bz2-compressed CSV per year, named ``accident_<year>.csv.bz2``,
    with at least the columns STATE, MONTH, LONGITUD and LATITUDE.
    Files are resolved relative to *data_dir* (default: the current working
    directory).  Nothing is cached; every call reads from disk.

Per-year isolation:
    ``read_years`` never lets one bad year abort the others.  A year whose
    value cannot be coerced, whose file is missing, or whose file cannot be
    parsed produces a warning and a ``None`` slot in the returned list.
"""

from __future__ import annotations

import logging
import os
import warnings
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import pandas as pd

from ..errors import FileNotFound, InvalidYear, ParseFailure
from ..utils.convert import as_integer

log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

# ---------------------------------------------------------------------------
# File naming / schema constants
# ---------------------------------------------------------------------------
FILENAME_PATTERN: str = "accident_{year:d}.csv.bz2"

# Columns kept by read_years() after the year annotation
YEAR_COLUMNS: List[str] = ["MONTH", "year"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def filename_for(year: Union[int, str]) -> str:
    """
    Build the conventional accident filename for *year*.

    Args:
        year: Year as an int or a numeric string (``2015`` or ``"2015"``).

    Returns:
        Filename such as ``'accident_2015.csv.bz2'``.

    Raises:
        InvalidYear: If *year* cannot be coerced to an integer.
    """
    return FILENAME_PATTERN.format(year=coerce_year(year))


def coerce_year(year: Union[int, str]) -> int:
    """Coerce *year* to ``int`` or raise ``InvalidYear``."""
    return as_integer(year, InvalidYear, "year")


def read(filename: PathLike) -> pd.DataFrame:
    """
    Parse one FARS accident file into a DataFrame.

    Compression is inferred from the file extension.  Column-type
    inference warnings from the parser are suppressed.

    Args:
        filename: Path to the file.

    Returns:
        DataFrame with one row per accident and the file's columns.

    Raises:
        FileNotFound: If *filename* does not exist.
        ParseFailure: If the file cannot be decoded or parsed.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFound(f"file '{filename}' does not exist")

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", pd.errors.DtypeWarning)
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            data = pd.read_csv(path, low_memory=False)
    except (
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
        UnicodeDecodeError,
        EOFError,
        OSError,
    ) as exc:
        raise ParseFailure(f"could not parse '{filename}': {exc}") from exc

    log.debug("Loaded %d rows from %s", len(data), path.name,
              extra={"file": str(path), "rows": len(data)})
    return data


def read_year(
    year: Union[int, str],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Resolve and read the file for a single *year*.

    Args:
        year: Year as an int or numeric string.
        data_dir: Directory holding the accident files.  Defaults to the
            current working directory.

    Returns:
        Full accident DataFrame for that year.

    Raises:
        InvalidYear, FileNotFound, ParseFailure: Propagated unchanged.
    """
    return read(resolve_path(filename_for(year), data_dir))


def read_years(
    years: Iterable[Union[int, str]],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Read the files for several years, keeping only MONTH and year.

    Each year is processed independently.  Failures are logged as
    ``"invalid year: <year>"`` warnings and leave ``None`` in that slot.

    Args:
        years: Ordered sequence of years (ints or numeric strings).
        data_dir: Directory holding the accident files.

    Returns:
        List the same length and order as *years*.  Each entry is either a
        DataFrame with columns ``[MONTH, year]`` or ``None``.
    """
    results: List[Optional[pd.DataFrame]] = []
    for year in years:
        try:
            year_int = coerce_year(year)
            data = read_year(year_int, data_dir)
            require_columns(data, ["MONTH"], filename_for(year_int))
            results.append(data.assign(year=year_int)[YEAR_COLUMNS])
        except (InvalidYear, FileNotFound, ParseFailure) as exc:
            log.warning("invalid year: %s", year,
                        extra={"year": str(year), "reason": str(exc)})
            results.append(None)
    return results


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def resolve_path(filename: str, data_dir: Optional[PathLike] = None) -> Path:
    """Join *filename* onto *data_dir* (or leave it relative to cwd)."""
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


def require_columns(
    data: pd.DataFrame,
    columns: Sequence[str],
    source: str,
) -> None:
    """Raise ``ParseFailure`` if any of *columns* is absent from *data*."""
    missing = [c for c in columns if c not in data.columns]
    if missing:
        raise ParseFailure(f"'{source}' is missing columns: {missing}")
