"""
Reader for the HYG stellar database (CSV, v4.x layout).

The file is read lazily in pandas chunks so only one chunk is held in
memory at a time. Every row is yielded; filtering is up to the caller.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional

import astropy.units as u
import pandas as pd

from .records import StarRecord
from ..config import HYG_CHUNK_SIZE, HYG_COLUMNS, HYG_UNKNOWN_DISTANCE_PC, UNKNOWN_MAGNITUDE
from ..exceptions import SourceUnavailableError
from ..utils.io import designation_or_none, safe_float, safe_int, safe_text

log = logging.getLogger(__name__)

PARSEC_TO_AU = (1 * u.pc).to_value(u.AU)
KM_PER_S_TO_AU_PER_DAY = (1 * u.km / u.s).to_value(u.AU / u.day)


def parsec_to_au(distance_pc: Optional[float]) -> float:
    """Convert a HYG distance to AU; missing or placeholder distances become 0."""
    if distance_pc is None or distance_pc <= 0 or distance_pc >= HYG_UNKNOWN_DISTANCE_PC:
        return 0.0
    return distance_pc * PARSEC_TO_AU


def _row_to_record(row) -> Optional[StarRecord]:
    star_id = safe_int(row.id)
    ra = safe_float(row.rarad)
    dec = safe_float(row.decrad)

    if star_id is None or ra is None or dec is None:
        return None

    magnitude = safe_float(row.mag)
    rv = safe_float(row.rv)

    return StarRecord(
        id=star_id,
        ra=ra,
        dec=dec,
        magnitude=magnitude if magnitude is not None else UNKNOWN_MAGNITUDE,
        pm_ra=safe_float(row.pmrarad) or 0.0,
        pm_dec=safe_float(row.pmdecrad) or 0.0,
        distance=parsec_to_au(safe_float(row.dist)),
        rv=rv * KM_PER_S_TO_AU_PER_DAY if rv is not None else 0.0,
        constellation=safe_text(row.con),
        spectral_type=safe_text(row.spect),
        bayer=safe_text(row.bayer),
        flamsteed=designation_or_none(row.flam),
        hd=designation_or_none(row.hd),
        hip=designation_or_none(row.hip),
        hr=designation_or_none(row.hr),
        name=safe_text(row.proper),
    )


def read_hyg_catalog(filepath: str, chunk_size: int = HYG_CHUNK_SIZE) -> Iterator[StarRecord]:
    """
    Lazily read the HYG catalog.

    Args:
        filepath: Path to the HYG CSV file
        chunk_size: Number of rows parsed per pandas chunk

    Yields:
        One StarRecord per usable row. Rows without id or coordinates are
        skipped with a debug message.

    Raises:
        SourceUnavailableError: If the file is missing or lacks HYG columns
    """
    path = Path(filepath)
    if not path.is_file():
        raise SourceUnavailableError(f"HYG catalog not found: {filepath}")

    log.info(f"Reading HYG catalog: {filepath}")

    try:
        reader = pd.read_csv(path, usecols=HYG_COLUMNS, chunksize=chunk_size, low_memory=False)
    except (OSError, ValueError) as e:
        raise SourceUnavailableError(f"Cannot open HYG catalog {filepath}: {e}") from e

    with reader:
        for chunk in reader:
            for row in chunk.itertuples(index=False):
                record = _row_to_record(row)
                if record is None:
                    log.debug(f"Skipping HYG row without id or coordinates: {row}")
                    continue
                yield record
