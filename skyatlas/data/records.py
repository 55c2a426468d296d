"""
Typed records produced by the catalog sources.

Angles are in radians, proper motions in radians per year, distances in
astronomical units and radial velocities in AU per day, matching the
units of the output database. ``ClusterRow`` is the exception: it mirrors
the remote SIMBAD query and keeps its native units.
"""

from dataclasses import dataclass
from typing import Optional

from ..catalogs.taxonomy import CatalogType, SkyObjectType
from ..config import UNKNOWN_MAGNITUDE


@dataclass(frozen=True)
class StarRecord:
    """One row of the stellar catalog."""
    id: int
    ra: float
    dec: float
    magnitude: float
    pm_ra: float = 0.0
    pm_dec: float = 0.0
    distance: float = 0.0
    rv: float = 0.0
    constellation: Optional[str] = None
    spectral_type: Optional[str] = None
    bayer: Optional[str] = None
    flamsteed: Optional[str] = None
    hd: Optional[str] = None
    hip: Optional[str] = None
    hr: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class DsoRecord:
    """One row of the deep-sky catalog with its optional sub-catalog designations."""
    id: int
    object_type: SkyObjectType
    ra: float
    dec: float
    distance: float = 0.0
    blue_magnitude: float = UNKNOWN_MAGNITUDE
    visual_magnitude: float = UNKNOWN_MAGNITUDE
    morphological_type: Optional[str] = None
    ngc: Optional[str] = None
    ic: Optional[str] = None
    messier: Optional[str] = None
    caldwell: Optional[str] = None
    barnard: Optional[str] = None
    sharpless: Optional[str] = None
    vdb: Optional[str] = None
    rcw: Optional[str] = None
    ldn: Optional[str] = None
    lbn: Optional[str] = None
    collinder: Optional[str] = None
    melotte: Optional[str] = None
    pgc: Optional[str] = None
    ugc: Optional[str] = None
    ced: Optional[str] = None
    arp: Optional[str] = None
    vv: Optional[str] = None
    pk: Optional[str] = None
    png: Optional[str] = None
    snrg: Optional[str] = None
    aco: Optional[str] = None
    eso: Optional[str] = None
    dwb: Optional[str] = None
    trumpler: Optional[str] = None
    stock: Optional[str] = None
    ruprecht: Optional[str] = None


# Order in which the deep-sky phase tries each designation field
DSO_DESIGNATION_FIELDS = (
    ('ngc', CatalogType.NGC),
    ('ic', CatalogType.IC),
    ('messier', CatalogType.MESSIER),
    ('caldwell', CatalogType.CALDWELL),
    ('barnard', CatalogType.BARNARD),
    ('sharpless', CatalogType.SHARPLESS),
    ('vdb', CatalogType.VDB),
    ('rcw', CatalogType.RCW),
    ('ldn', CatalogType.LDN),
    ('lbn', CatalogType.LBN),
    ('collinder', CatalogType.COLLINDER),
    ('melotte', CatalogType.MELOTTE),
    ('pgc', CatalogType.PGC),
    ('ugc', CatalogType.UGC),
    ('ced', CatalogType.CED),
    ('arp', CatalogType.ARP),
    ('vv', CatalogType.VV),
    ('pk', CatalogType.PK),
    ('png', CatalogType.PNG),
    ('snrg', CatalogType.SNRG),
    ('aco', CatalogType.ACO),
    ('eso', CatalogType.ESO),
    ('dwb', CatalogType.DWB),
    ('trumpler', CatalogType.TRUMPLER),
    ('stock', CatalogType.STOCK),
    ('ruprecht', CatalogType.RUPRECHT),
)


@dataclass(frozen=True)
class NameRecord:
    """A common name for a catalog designation, from the names reference."""
    catalog_type: CatalogType
    designation: str
    display_name: str


@dataclass(frozen=True)
class ClusterRow:
    """One result row of the SIMBAD star cluster query (degrees, mas, km/s)."""
    oid: int
    ra_deg: float
    dec_deg: float
    otype: str
    identifiers: str
    pm_ra_mas: Optional[float] = None
    pm_dec_mas: Optional[float] = None
    parallax_mas: Optional[float] = None
    radial_velocity_kms: Optional[float] = None
    v_magnitude: Optional[float] = None
    b_magnitude: Optional[float] = None
    j_magnitude: Optional[float] = None
    h_magnitude: Optional[float] = None


@dataclass(frozen=True)
class SkyObject:
    """A row of the ``objects`` table, after derived fields have been applied."""
    id: int
    object_type: SkyObjectType
    ra: float
    dec: float
    magnitude: float
    pm_ra: float
    pm_dec: float
    distance: int
    rv: float
    constellation: int
    spectral_type: Optional[str] = None
