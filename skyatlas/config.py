"""
Configuration constants for SkyAtlas.

This module centralizes all configuration parameters used by the catalog
builder, making them easily configurable and maintainable.
"""

# === Input / Output Paths ===
DEFAULT_DATA_DIRECTORY = 'data'
DEFAULT_DATABASE_PATH = 'data/skyatlas.sqlite'
DEFAULT_HYG_CATALOG_PATH = 'data/hyg_v42.csv'
DEFAULT_DSO_CATALOG_PATH = 'data/catalog.txt'
DEFAULT_NAMES_PATH = 'data/names.dat'

# === Object Id Partition ===
# Each build phase writes into its own id range so phases never collide
STAR_ID_LIMIT = 1_000_000
DSO_ID_OFFSET = 1_000_000
CLUSTER_ID_OFFSET = 2_000_000

# === Magnitudes ===
UNKNOWN_MAGNITUDE = 99.0             # Sentinel for "no magnitude available"
STAR_MAX_MAGNITUDE = 7.0             # Faintest star kept by the star phase
MAGNITUDE_DECIMALS = 2               # Precision of stored magnitudes

# === Constellation Lookup ===
CONSTELLATION_BATCH_SIZE = 5_000     # Positions per vectorised IAU boundary lookup

# === HYG Stellar Catalog ===
HYG_CHUNK_SIZE = 10_000              # Rows per pandas chunk (bounds memory)
HYG_UNKNOWN_DISTANCE_PC = 100_000.0  # HYG placeholder for missing distances
HYG_COLUMNS = [
    'id', 'hip', 'hd', 'hr', 'proper', 'bayer', 'flam', 'con',
    'mag', 'dist', 'rv', 'spect', 'rarad', 'decrad', 'pmrarad', 'pmdecrad'
]

# === Stellarium Deep-Sky Catalog (catalog.txt) ===
STELLARIUM_CATALOG_COLUMNS = [
    'id', 'ra', 'dec', 'bmag', 'vmag', 'type', 'mtype',
    'major_axis', 'minor_axis', 'orientation',
    'z', 'z_err', 'plx', 'plx_err', 'dist', 'dist_err',
    'ngc', 'ic', 'm', 'c', 'b', 'sh2', 'vdb', 'rcw', 'ldn', 'lbn',
    'cr', 'mel', 'pgc', 'ugc', 'ced', 'arp', 'vv', 'pk', 'png', 'snrg',
    'aco', 'hcg', 'eso', 'vdbh', 'dwb', 'tr', 'st', 'ru', 'vdbha'
]
STELLARIUM_CATALOG_MIN_COLUMNS = 16  # Everything up to the distance error
STELLARIUM_UNKNOWN_MAGNITUDE_THRESHOLD = 99.0
STELLARIUM_NAMES_PATTERN = r'^(\S+)\s+(\S+)\s+_\("(.*?)"\)'

# Text catalog encoding (undecodable bytes are replaced)
DEFAULT_TEXT_ENCODING = 'utf-8'

# === SIMBAD Star Cluster Query ===
SIMBAD_STAR_CLUSTER_QUERY = """
select distinct b.oid, b.ra, b.dec, b.otype, b.pmra, b.pmdec, b.plx_value, b.rvz_radvel,
       f.V, f.B, f.J, f.H, ids.ids
from basic b
join ident i on b.oid = i.oidref and i.id like 'Cl %'
join ids ids on b.oid = ids.oidref
left join allfluxes f on f.oidref = b.oid
where b.ra is not null and b.dec is not null and (b.otype = 'Cl*..' or b.otype = 'As*..')
order by oid asc
"""
SIMBAD_TIMEOUT_SECONDS = 300
SIMBAD_MAX_ROWS = 500_000
SIMBAD_IDENTIFIER_SEPARATOR = '|'

# SIMBAD object types mapped to cluster object types (anything else is an association)
SIMBAD_OPEN_CLUSTER_OTYPE = 'OpC'
SIMBAD_GLOBULAR_CLUSTER_OTYPE = 'GlC'
SIMBAD_STAR_CLUSTER_OTYPE = 'Cl*'

# === Cluster Identifier Patterns ===
CLUSTER_DISCOVERER_PATTERN = r'Cl\s+([-\w]+)\s+(\d+\w?)'
CLUSTER_NGC_PATTERN = r'NGC\s+(\d+)'
CLUSTER_IC_PATTERN = r'IC\s+(\d+)'

# === SQLite Store ===
OBJECTS_TABLE = 'objects'
NAMES_TABLE = 'names'
SQLITE_JOURNAL_MODE = 'WAL'

# === Logging Configuration ===
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
