"""
Merge engine: turns catalog identifiers into name rows and object rows.

Every designation an object carries is expanded into the names it implies
(common names from the name index, observing-list designations from the
cross-reference tables and the designation itself). Writes go through the
store's conflict-absorbing inserts, so the first writer of an object wins
and later writers can only add names.
"""

import logging
from typing import Optional

from .constellations import resolve_constellation
from ..catalogs.cross_reference import CrossReferenceTables
from ..catalogs.name_index import NameIndex
from ..catalogs.taxonomy import (
    SECONDARY_ONLY_CATALOGS, SPECTRAL_TYPE_OBJECT_TYPES, CatalogType, SkyObjectType
)
from ..config import MAGNITUDE_DECIMALS, UNKNOWN_MAGNITUDE
from ..data.records import SkyObject
from ..store.database import SkyObjectStore

log = logging.getLogger(__name__)


def derive_magnitude(object_type: SkyObjectType, visual: float, blue: float = UNKNOWN_MAGNITUDE) -> float:
    """
    Magnitude stored for a deep-sky object.

    Unknown visual magnitude stays unknown. Dark nebulae store an opacity
    rating in the visual column, so it is inverted to sort like a
    brightness. Everything else takes the brighter of visual and blue.

    Examples:
        (DARK_NEBULA, 5) -> 94
        (GALAXY, 9, 10) -> 9
    """
    if visual == UNKNOWN_MAGNITUDE:
        return UNKNOWN_MAGNITUDE
    if object_type == SkyObjectType.DARK_NEBULA:
        return UNKNOWN_MAGNITUDE - visual
    return min(visual, blue)


def retain_spectral_type(object_type: SkyObjectType, value: Optional[str]) -> Optional[str]:
    """Keep a spectral or morphological type only where it is meaningful for the object type."""
    if not value or value.startswith('-'):
        return None
    if object_type not in SPECTRAL_TYPE_OBJECT_TYPES:
        return None
    if value[0].isdigit():
        return None
    return value


class MergeEngine:
    """Writes objects and their names into a store."""

    def __init__(self, store: SkyObjectStore, name_index: NameIndex, cross_references: CrossReferenceTables):
        self.store = store
        self.name_index = name_index
        self.cross_references = cross_references
        self.names_written = 0
        self.objects_written = 0

    def add_name(self, object_id: int, catalog_type: CatalogType, name: str) -> bool:
        """Attach one name; duplicates are ignored. Returns whether a row was written."""
        written = self.store.insert_name(object_id, catalog_type, name)
        if written:
            self.names_written += 1
        return written

    def attach_names_for_identifier(self, object_id: int, catalog_type: CatalogType, designation: str,
                                    attach_self: bool = True) -> bool:
        """
        Attach every name implied by one designation of an object.

        Args:
            object_id: Object the names belong to
            catalog_type: Catalog of the designation; ``CatalogType.NONE``
                looks up names only and is never attached itself
            designation: The designation within that catalog
            attach_self: Also attach the designation itself. Always off for
                catalogs in ``SECONDARY_ONLY_CATALOGS``.

        Returns:
            True if the designation itself was attached or at least one
            common name or observing-list designation was found
        """
        if catalog_type in SECONDARY_ONLY_CATALOGS:
            attach_self = False

        found = False

        for display_name in self.name_index.lookup(catalog_type, designation):
            self.add_name(object_id, CatalogType.NAME, display_name)
            found = True

        for list_type, list_designation in self.cross_references.lookup(catalog_type, designation):
            self.add_name(object_id, list_type, list_designation)
            found = True

        if attach_self and catalog_type >= 0:
            self.add_name(object_id, catalog_type, designation)
            return True

        return found

    def add_object(self,
                   object_id: int,
                   object_type: SkyObjectType,
                   ra: float,
                   dec: float,
                   magnitude: float,
                   pm_ra: float = 0.0,
                   pm_dec: float = 0.0,
                   distance: float = 0.0,
                   rv: float = 0.0,
                   spectral_type: Optional[str] = None,
                   constellation: Optional[str] = None) -> bool:
        """
        Build the stored object and insert it unless the id exists.

        The magnitude is rounded, the distance stored as a whole number of
        AU, the spectral type filtered and the constellation resolved
        (catalog value first, position otherwise).

        Returns:
            True if a new row was written
        """
        sky_object = SkyObject(
            id=object_id,
            object_type=SkyObjectType(object_type),
            ra=ra,
            dec=dec,
            magnitude=round(magnitude, MAGNITUDE_DECIMALS),
            pm_ra=pm_ra,
            pm_dec=pm_dec,
            distance=int(round(abs(distance))),
            rv=rv,
            constellation=resolve_constellation(ra, dec, constellation),
            spectral_type=retain_spectral_type(object_type, spectral_type),
        )

        written = self.store.insert_object(sky_object)
        if written:
            self.objects_written += 1
        else:
            log.debug(f"Object {object_id} already exists, keeping the first version")
        return written
