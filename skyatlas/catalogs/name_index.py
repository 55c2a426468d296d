"""
Index of common names keyed by catalog designation.

The index is built once from the names reference file and then only read.
Display names that start with a Greek letter are transliterated to the
three-letter Latin abbreviations used for Bayer designations.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from .taxonomy import CatalogType
from ..data.records import NameRecord

log = logging.getLogger(__name__)

GREEK_LETTER_ABBREVIATIONS: Dict[str, str] = {
    'α': 'Alp',
    'β': 'Bet',
    'γ': 'Gam',
    'δ': 'Del',
    'ε': 'Eps',
    'ζ': 'Zet',
    'η': 'Eta',
    'θ': 'The',
    'ι': 'Iot',
    'κ': 'Kap',
    'λ': 'Lam',
    'μ': 'Mu',
    'ν': 'Nu',
    'ξ': 'Xi',
    'ο': 'Omi',
    'π': 'Pi',
    'ρ': 'Rho',
    'σ': 'Sig',
    'τ': 'Tau',
    'υ': 'Ups',
    'φ': 'Phi',
    'χ': 'Chi',
    'ψ': 'Psi',
    'ω': 'Ome',
}

# Common names missing from the names reference
MANUAL_ALIASES: Tuple[Tuple[CatalogType, str, str], ...] = (
    (CatalogType.IC, '342', 'Hidden Galaxy'),
    (CatalogType.NGC, '6752', 'Great Peacock Globular'),
)


def transliterate_greek(name: str) -> str:
    """
    Replace a leading Greek letter with its Latin abbreviation.

    Examples:
        "α Centauri" -> "Alp Centauri"
        "Sirius" -> "Sirius"
    """
    if name:
        abbreviation = GREEK_LETTER_ABBREVIATIONS.get(name[0])
        if abbreviation is not None:
            return f"{abbreviation} {name[1:].strip()}"
    return name


class NameIndex:
    """Immutable mapping of (catalog, designation) to display names."""

    def __init__(self, entries: Iterable[Tuple[CatalogType, str, str]]):
        """
        Args:
            entries: (catalog type, designation, display name) triples, used
                as given. Use ``from_records`` to apply transliteration and
                the manual aliases.
        """
        index: Dict[CatalogType, Dict[str, List[str]]] = {}
        size = 0

        for catalog_type, designation, display_name in entries:
            index.setdefault(CatalogType(catalog_type), {}).setdefault(designation, []).append(display_name)
            size += 1

        self._index = {
            catalog_type: {designation: tuple(names) for designation, names in designations.items()}
            for catalog_type, designations in index.items()
        }
        self._size = size

    @classmethod
    def from_records(cls, records: Iterable[NameRecord]) -> 'NameIndex':
        """Build the index from names reference records plus the manual aliases."""
        entries = [
            (record.catalog_type, record.designation, transliterate_greek(record.display_name))
            for record in records
        ]
        entries.extend(MANUAL_ALIASES)

        index = cls(entries)
        log.info(f"Name index built with {len(index)} names across {len(index.catalogs())} catalogs")
        return index

    def lookup(self, catalog_type: CatalogType, designation: str) -> Tuple[str, ...]:
        """Display names for a designation, empty when there are none."""
        return self._index.get(catalog_type, {}).get(designation, ())

    def catalogs(self) -> List[CatalogType]:
        return sorted(self._index)

    def __len__(self) -> int:
        return self._size
