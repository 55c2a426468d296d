"""
Readers for the Stellarium deep-sky catalog and its names reference.

``catalog.txt`` is tab-separated with one object per line. Its type column
holds either integer SkyObjectType codes or the Stellarium letter codes
(``G``, ``OC``...). ``names.dat`` holds one common name per line as
``<PREFIX> <ID> _("<name>")``. Both are read line by line so the whole file
is never held in memory.
"""

import logging
import math
import re
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

import astropy.units as u

from .records import DsoRecord, NameRecord
from ..catalogs.taxonomy import STELLARIUM_TYPE_CODES, SkyObjectType, catalog_for_prefix
from ..config import (
    DEFAULT_TEXT_ENCODING, STELLARIUM_CATALOG_COLUMNS, STELLARIUM_CATALOG_MIN_COLUMNS,
    STELLARIUM_NAMES_PATTERN, STELLARIUM_UNKNOWN_MAGNITUDE_THRESHOLD, UNKNOWN_MAGNITUDE
)
from ..exceptions import SourceUnavailableError, UnrecognizedRecordError
from ..utils.io import designation_or_none, safe_float, safe_int, safe_text

log = logging.getLogger(__name__)

KILOPARSEC_TO_AU = (1 * u.kpc).to_value(u.AU)

# catalog.txt column -> DsoRecord field, for the designation columns
_DESIGNATION_COLUMNS = {
    'ngc': 'ngc', 'ic': 'ic', 'm': 'messier', 'c': 'caldwell', 'b': 'barnard',
    'sh2': 'sharpless', 'vdb': 'vdb', 'rcw': 'rcw', 'ldn': 'ldn', 'lbn': 'lbn',
    'cr': 'collinder', 'mel': 'melotte', 'pgc': 'pgc', 'ugc': 'ugc', 'ced': 'ced',
    'arp': 'arp', 'vv': 'vv', 'pk': 'pk', 'png': 'png', 'snrg': 'snrg', 'aco': 'aco',
    'eso': 'eso', 'dwb': 'dwb', 'tr': 'trumpler', 'st': 'stock', 'ru': 'ruprecht',
}

_NAMES_REGEX = re.compile(STELLARIUM_NAMES_PATTERN)


def _open_text(filepath: str, description: str) -> TextIO:
    path = Path(filepath)
    if not path.is_file():
        raise SourceUnavailableError(f"{description} not found: {filepath}")
    try:
        return open(path, encoding=DEFAULT_TEXT_ENCODING, errors='replace')
    except OSError as e:
        raise SourceUnavailableError(f"Cannot open {description} {filepath}: {e}") from e


def _magnitude(value: str) -> float:
    magnitude = safe_float(value)
    if magnitude is None or magnitude >= STELLARIUM_UNKNOWN_MAGNITUDE_THRESHOLD:
        return UNKNOWN_MAGNITUDE
    return magnitude


def parse_object_type(value: str) -> SkyObjectType:
    """
    Object type from the type column: an integer code, or the letter code
    the text catalog uses (``G``, ``OC``, ``PN``...).

    Raises:
        ValueError: For an integer that is not a SkyObjectType
        KeyError: For an unknown letter code
    """
    type_code = safe_int(value)
    if type_code is not None:
        return SkyObjectType(type_code)
    return STELLARIUM_TYPE_CODES[value.strip().upper()]


def parse_catalog_line(line: str) -> DsoRecord:
    """
    Parse one tab-separated line of ``catalog.txt``.

    Args:
        line: Raw line without comment marker

    Returns:
        The parsed DsoRecord (angles in radians, distance in AU)

    Raises:
        UnrecognizedRecordError: If the line is truncated, has no usable id
            or coordinates, or carries an unknown type code
    """
    fields: List[str] = line.rstrip('\r\n').split('\t')
    if len(fields) < STELLARIUM_CATALOG_MIN_COLUMNS:
        raise UnrecognizedRecordError(f"Truncated catalog line ({len(fields)} columns)")

    values = dict(zip(STELLARIUM_CATALOG_COLUMNS, fields))

    source_id = safe_int(values['id'])
    ra_deg = safe_float(values['ra'])
    dec_deg = safe_float(values['dec'])
    if source_id is None or ra_deg is None or dec_deg is None:
        raise UnrecognizedRecordError(f"Catalog line without id or coordinates: {fields[:3]}")

    try:
        object_type = parse_object_type(values['type'])
    except (KeyError, ValueError) as e:
        raise UnrecognizedRecordError(f"Unknown object type {values['type']!r} for catalog id {source_id}") from e

    distance_kpc = safe_float(values['dist'])
    designations = {
        field: designation_or_none(values.get(column))
        for column, field in _DESIGNATION_COLUMNS.items()
    }

    return DsoRecord(
        id=source_id,
        object_type=object_type,
        ra=math.radians(ra_deg),
        dec=math.radians(dec_deg),
        distance=abs(distance_kpc) * KILOPARSEC_TO_AU if distance_kpc else 0.0,
        blue_magnitude=_magnitude(values['bmag']),
        visual_magnitude=_magnitude(values['vmag']),
        morphological_type=safe_text(values['mtype']),
        **designations,
    )


def read_stellarium_catalog(filepath: str) -> Iterator[DsoRecord]:
    """
    Lazily read the deep-sky catalog.

    Lines that cannot be parsed are logged and skipped.

    Raises:
        SourceUnavailableError: If the file cannot be opened
    """
    handle = _open_text(filepath, "Deep-sky catalog")
    log.info(f"Reading deep-sky catalog: {filepath}")

    with handle:
        for line_number, line in enumerate(handle, start=1):
            if not line.strip() or line.startswith('#'):
                continue
            try:
                yield parse_catalog_line(line)
            except UnrecognizedRecordError as e:
                log.warning(f"Skipping catalog line {line_number}: {e}")


def parse_names_line(line: str) -> Optional[NameRecord]:
    """
    Parse one line of ``names.dat``.

    Returns:
        The NameRecord, or None for comments and lines without a name.
        Unknown prefixes map to ``CatalogType.NONE``.
    """
    if not line.strip() or line.startswith('#'):
        return None

    match = _NAMES_REGEX.match(line)
    if not match:
        return None

    prefix, designation, display_name = match.groups()
    if not display_name:
        return None

    return NameRecord(catalog_for_prefix(prefix), designation, display_name)


def read_stellarium_names(filepath: str) -> Iterator[NameRecord]:
    """
    Lazily read the names reference.

    Raises:
        SourceUnavailableError: If the file cannot be opened
    """
    handle = _open_text(filepath, "Names reference")
    log.info(f"Reading names reference: {filepath}")

    with handle:
        for line in handle:
            record = parse_names_line(line)
            if record is None:
                if line.strip() and not line.startswith('#'):
                    log.debug(f"Ignoring unparseable names line: {line.rstrip()}")
                continue
            yield record
