"""
Catalogue Loader

Reads HYG-style star tables (CSV) into CatalogRecord instances.
Fields are positional. A leading header row (text in every key column)
is dropped before the numeric check and is not counted as malformed.
Rows longer than the first line are cut to the columns used, not skipped.

Column layout used:
  0 id   6 proper name   7 ra (hours)   8 dec (deg)   9 dist (pc)
  13 mag   14 absmag   15 spectral class
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from core.types import CatalogRecord

COL_ID      = 0
COL_NAME    = 6
COL_RA      = 7
COL_DEC     = 8
COL_DIST    = 9
COL_MAG     = 13
COL_ABSMAG  = 14
COL_SPECT   = 15
MIN_FIELDS  = 16


def _read_table(path: Path) -> pd.DataFrame:
    # everything as text; numeric coercion happens per column below
    return pd.read_csv(
        path,
        header=None,
        dtype=str,
        keep_default_na=False,
        encoding="utf-8",
        engine="python",
        on_bad_lines=_truncate,
    )


def _truncate(fields: List[str]) -> List[str]:
    # called by pandas for rows with more fields than the first line
    return fields[:MIN_FIELDS]


def _numeric(df: pd.DataFrame, col: int) -> np.ndarray:
    return pd.to_numeric(df[col], errors="coerce").to_numpy(np.float64)


def _text(value) -> Optional[str]:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return None
    text = str(value).strip()
    return text or None


def _is_header(df: pd.DataFrame) -> bool:
    first = df.iloc[0]
    for col in (COL_ID, COL_RA, COL_DEC, COL_MAG):
        text = _text(first[col])
        if text is None or not pd.isna(pd.to_numeric(text, errors="coerce")):
            return False
    return True


def records_from_frame(df: pd.DataFrame,
                       report_malformed: bool = False) -> List[CatalogRecord]:
    """
    Convert a positional table into CatalogRecords.

    A row is kept only when magnitude, RA and Dec are present and numeric
    (and the id is numeric). Missing distance / absolute magnitude become
    0.0, missing name / spectral class become None.
    """
    if len(df) == 0:
        return []

    df = df.reindex(columns=range(MIN_FIELDS), fill_value="")
    if _is_header(df):
        df = df.iloc[1:]
    n_rows = len(df)

    ids    = _numeric(df, COL_ID)
    ra     = _numeric(df, COL_RA)
    dec    = _numeric(df, COL_DEC)
    mag    = _numeric(df, COL_MAG)
    dist   = _numeric(df, COL_DIST)
    absmag = _numeric(df, COL_ABSMAG)

    keep = (np.isfinite(mag) & np.isfinite(ra) & np.isfinite(dec)
            & np.isfinite(ids))
    dist = np.where(np.isfinite(dist), dist, 0.0)
    absmag = np.where(np.isfinite(absmag), absmag, 0.0)

    names   = df[COL_NAME].to_numpy()
    spectra = df[COL_SPECT].to_numpy()

    records = [
        CatalogRecord(
            id=int(ids[i]),
            right_ascension=float(ra[i]),
            declination=float(dec[i]),
            apparent_magnitude=float(mag[i]),
            absolute_magnitude=float(absmag[i]),
            distance=float(dist[i]),
            name=_text(names[i]),
            spectral_class=_text(spectra[i]),
        )
        for i in np.flatnonzero(keep)
    ]

    dropped = n_rows - len(records)
    if report_malformed and dropped:
        print(f"  Warning: skipped {dropped} malformed catalog rows")

    return records


def records_from_rows(rows: Iterable[Sequence],
                      report_malformed: bool = False) -> List[CatalogRecord]:
    """Same as records_from_frame, for rows already in memory."""
    return records_from_frame(pd.DataFrame(list(rows)), report_malformed)


def load_catalogue(path, report_malformed: bool = False) -> List[CatalogRecord]:
    """
    Load a star catalogue file.

    A missing file is not fatal: a warning is printed and the chart
    starts empty.
    """
    path = Path(path)
    if not path.exists():
        print(f"Catalog file not found: {path}")
        return []

    print(f"Loading {path.name} ({path.stat().st_size / 1024 / 1024:.1f} MB)...")
    records = records_from_frame(_read_table(path), report_malformed)
    print(f"  Stars: {len(records):,}")
    return records
