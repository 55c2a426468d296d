"""
Constellation lookup.

Objects store their constellation as an index into the 88 IAU
constellations ordered alphabetically by Latin name. When a catalog does
not provide the constellation it is computed from the position using the
IAU boundaries shipped with astropy.
"""

import logging
from typing import List, Optional, Sequence

import astropy.units as u
import numpy as np
from astropy.coordinates import SkyCoord

log = logging.getLogger(__name__)

# IAU abbreviations in alphabetical order of the Latin names (Andromeda .. Vulpecula)
CONSTELLATIONS = (
    'AND', 'ANT', 'APS', 'AQR', 'AQL', 'ARA', 'ARI', 'AUR', 'BOO', 'CAE',
    'CAM', 'CNC', 'CVN', 'CMA', 'CMI', 'CAP', 'CAR', 'CAS', 'CEN', 'CEP',
    'CET', 'CHA', 'CIR', 'COL', 'COM', 'CRA', 'CRB', 'CRV', 'CRT', 'CRU',
    'CYG', 'DEL', 'DOR', 'DRA', 'EQU', 'ERI', 'FOR', 'GEM', 'GRU', 'HER',
    'HOR', 'HYA', 'HYI', 'IND', 'LAC', 'LEO', 'LMI', 'LEP', 'LIB', 'LUP',
    'LYN', 'LYR', 'MEN', 'MIC', 'MON', 'MUS', 'NOR', 'OCT', 'OPH', 'ORI',
    'PAV', 'PEG', 'PER', 'PHE', 'PIC', 'PSC', 'PSA', 'PUP', 'PYX', 'RET',
    'SGE', 'SGR', 'SCO', 'SCL', 'SCT', 'SER', 'SEX', 'TAU', 'TEL', 'TRI',
    'TRA', 'TUC', 'UMA', 'UMI', 'VEL', 'VIR', 'VOL', 'VUL',
)

_INDEX = {abbreviation: index for index, abbreviation in enumerate(CONSTELLATIONS)}


def constellation_index(abbreviation: Optional[str]) -> Optional[int]:
    """
    Index of an IAU abbreviation, case-insensitive.

    Returns:
        0..87, or None when the abbreviation is missing or unknown
    """
    if not abbreviation:
        return None
    return _INDEX.get(abbreviation.strip().upper())


def constellation_at(ra: float, dec: float) -> int:
    """Constellation index containing the given ICRS position (radians)."""
    coord = SkyCoord(ra=ra * u.rad, dec=dec * u.rad, frame='icrs')
    abbreviation = coord.get_constellation(short_name=True)
    return _INDEX[abbreviation.upper()]


def constellations_at(ra: Sequence[float], dec: Sequence[float]) -> List[int]:
    """Constellation indices for many positions (radians), computed in one boundary lookup."""
    if len(ra) == 0:
        return []
    coords = SkyCoord(ra=np.asarray(ra, dtype=float) * u.rad, dec=np.asarray(dec, dtype=float) * u.rad, frame='icrs')
    return [_INDEX[abbreviation.upper()] for abbreviation in coords.get_constellation(short_name=True)]


def resolve_constellation(ra: float, dec: float, source: Optional[str] = None) -> int:
    """
    Constellation index for an object.

    The catalog's own constellation wins when it is recognised; otherwise
    the position decides.
    """
    index = constellation_index(source)
    if index is not None:
        return index

    if source:
        log.debug(f"Unrecognised constellation {source!r}, computing from position")

    return constellation_at(ra, dec)
