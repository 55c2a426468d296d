"""
Parser for the identifiers SIMBAD lists for a star cluster.

Each identifier is classified as exactly one of: a discoverer designation
(``Cl Berkeley 59``), a backing NGC or IC reference, or no match. The
discoverer form is tried first, then NGC, then IC.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from ..catalogs.taxonomy import CLUSTER_DISCOVERER_CATALOGS, CatalogType
from ..config import (
    CLUSTER_DISCOVERER_PATTERN, CLUSTER_IC_PATTERN, CLUSTER_NGC_PATTERN,
    SIMBAD_IDENTIFIER_SEPARATOR
)

_DISCOVERER_REGEX = re.compile(CLUSTER_DISCOVERER_PATTERN)
_NGC_REGEX = re.compile(CLUSTER_NGC_PATTERN)
_IC_REGEX = re.compile(CLUSTER_IC_PATTERN)


class IdentifierKind(Enum):
    NO_MATCH = 'no_match'
    DISCOVERER = 'discoverer'
    NGC_REF = 'ngc'
    IC_REF = 'ic'


@dataclass(frozen=True)
class ClusterIdentifier:
    """
    A classified identifier.

    For ``DISCOVERER`` the ``name`` is the discoverer (``Berkeley``) and
    ``catalog`` is its CatalogType, or None when the discoverer is not a
    known catalog. For NGC/IC references ``catalog`` is NGC or IC.
    """
    kind: IdentifierKind
    designation: Optional[str] = None
    name: Optional[str] = None
    catalog: Optional[CatalogType] = None

    @property
    def is_known(self) -> bool:
        return self.catalog is not None


NO_MATCH = ClusterIdentifier(IdentifierKind.NO_MATCH)


def parse_identifier(text: str) -> ClusterIdentifier:
    """
    Classify one identifier.

    Examples:
        "Cl Berkeley 59" -> DISCOVERER (BERKELEY, "59")
        "NGC 7822" -> NGC_REF (NGC, "7822")
        "2MASS J00..." -> NO_MATCH
    """
    match = _DISCOVERER_REGEX.search(text)
    if match:
        name, designation = match.groups()
        return ClusterIdentifier(IdentifierKind.DISCOVERER, designation, name,
                                 CLUSTER_DISCOVERER_CATALOGS.get(name))

    match = _NGC_REGEX.search(text)
    if match:
        return ClusterIdentifier(IdentifierKind.NGC_REF, match.group(1), 'NGC', CatalogType.NGC)

    match = _IC_REGEX.search(text)
    if match:
        return ClusterIdentifier(IdentifierKind.IC_REF, match.group(1), 'IC', CatalogType.IC)

    return NO_MATCH


def parse_identifiers(identifiers: str) -> List[ClusterIdentifier]:
    """Parse a ``|``-separated identifier list, dropping identifiers that match nothing."""
    parsed = (parse_identifier(part) for part in identifiers.split(SIMBAD_IDENTIFIER_SEPARATOR))
    return [identifier for identifier in parsed if identifier.kind is not IdentifierKind.NO_MATCH]


def first_of_kind(identifiers: Iterable[ClusterIdentifier], kind: IdentifierKind) -> Optional[ClusterIdentifier]:
    return next((identifier for identifier in identifiers if identifier.kind is kind), None)
