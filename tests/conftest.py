"""Shared fixtures: small bz2-compressed FARS accident files on disk."""

from pathlib import Path

import pandas as pd
import pytest

from fars.utils.logging import reset_logging

# 2013: Alabama (1) x3, California (6) x2, with coordinate sentinels
ACCIDENTS_2013 = pd.DataFrame({
    "ST_CASE":  [10001, 10002, 10003, 60001, 60002],
    "STATE":    [1, 1, 1, 6, 6],
    "MONTH":    [1, 1, 2, 3, 12],
    "LONGITUD": [-86.5, 999.9999, -87.0, -120.0, -121.0],
    "LATITUDE": [32.5, 33.0, 99.9999, 37.0, 38.0],
    "FATALS":   [1, 2, 1, 1, 3],
})

ACCIDENTS_2014 = pd.DataFrame({
    "ST_CASE":  [10001, 60001, 60002],
    "STATE":    [1, 6, 6],
    "MONTH":    [1, 1, 5],
    "LONGITUD": [-86.0, -118.0, -119.5],
    "LATITUDE": [31.0, 34.0, 36.5],
    "FATALS":   [1, 1, 2],
})


def write_accidents(directory: Path, year: int, df: pd.DataFrame) -> Path:
    path = directory / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding accident_2013 and accident_2014 files."""
    write_accidents(tmp_path, 2013, ACCIDENTS_2013)
    write_accidents(tmp_path, 2014, ACCIDENTS_2014)
    return tmp_path


@pytest.fixture
def corrupt_dir(tmp_path: Path) -> Path:
    """Directory whose accident_2015 file is not valid bz2."""
    (tmp_path / "accident_2015.csv.bz2").write_bytes(b"this is not bzip2 data")
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    """Drop handlers installed by configure_logging() between tests."""
    yield
    reset_logging()
