"""
Catalog taxonomy: naming systems and object types.

The integer values of both enumerations are persisted in the output
database and read back by the GUI, so they must never be renumbered.
"""

from enum import IntEnum
from typing import Dict, FrozenSet


class CatalogType(IntEnum):
    """Naming system a designation belongs to."""
    NONE = -1  # Placeholder for names that belong to no known catalog
    NAME = 0
    NGC = 1
    IC = 2
    BAYER = 3  # Greek letters
    FLAMSTEED = 4  # Ordered numbers
    HD = 5
    HR = 6
    HIP = 7
    MESSIER = 8
    CALDWELL = 9
    BARNARD = 10
    SHARPLESS = 11
    LBN = 12
    LDN = 13
    MELOTTE = 14
    COLLINDER = 15
    ARP = 16
    ABELL = 17
    PGC = 18
    TRUMPLER = 19
    STOCK = 20
    RUPRECHT = 21
    UGC = 22
    CED = 23
    RCW = 24
    VDB = 25
    VV = 26
    PK = 27
    PNG = 28
    ACO = 29
    ESO = 30
    SNRG = 31
    DWB = 32
    BENNETT = 33
    DUNLOP = 34
    HERSCHEL = 35
    GUM = 36
    BOCHUM = 37
    # Open cluster discoverer catalogs
    ALESSI = 38
    ALICANTE = 39
    ALTER = 40
    ANTALOVA = 41
    APRIAMASWILI = 42
    CL_ARP = 43
    BARHATOVA = 44
    BASEL = 45
    BERKELEY = 46
    BICA = 47
    BIURAKAN = 48
    BLANCO = 49
    CHUPINA = 50
    CZERNIK = 51
    DANKS = 52
    DIAS = 53
    DJORG = 54
    DOLIDZE_DZIM = 55
    DOLIDZE = 56
    DUFAY = 57
    FEINSTEIN = 58
    FERRERO = 59
    GRAFF = 60
    GULLIVER = 61
    HAFFNER = 62
    HARVARD = 63
    HAUTE_PROVENCE = 64
    HOGG = 65
    ISKURZDAJAN = 66
    JOHANSSON = 67
    KHARCHENKO = 68
    KING = 69
    KRON = 70
    LINDSAY = 71
    LODEN = 72
    LYNGA = 73
    MAMAJEK = 74
    MOFFAT = 75
    MRK = 76
    PAL = 77
    PISMIS = 78
    PLATAIS = 79
    ROSLUND = 80
    SAURER = 81
    SHER = 82
    SKIFF = 83
    STEPHENSON = 84
    TERZAN = 85
    TOMBAUGH = 86
    TURNER = 87
    UPGREN = 88
    WATERLOO = 89
    WESTERLUND = 90
    ZWICKY = 91


class SkyObjectType(IntEnum):
    """Object classification shared by the stellar and deep-sky catalogs."""
    UNKNOWN = 0
    GALAXY = 1
    ACTIVE_GALAXY = 2
    RADIO_GALAXY = 3
    INTERACTING_GALAXY = 4
    QUASAR = 5
    STAR_CLUSTER = 6
    OPEN_STAR_CLUSTER = 7
    GLOBULAR_STAR_CLUSTER = 8
    STELLAR_ASSOCIATION = 9
    STAR_CLOUD = 10
    NEBULA = 11
    PLANETARY_NEBULA = 12
    DARK_NEBULA = 13
    REFLECTION_NEBULA = 14
    BIPOLAR_NEBULA = 15
    EMISSION_NEBULA = 16
    CLUSTER_ASSOCIATED_WITH_NEBULOSITY = 17
    HII_REGION = 18
    SUPERNOVA_REMNANT = 19
    INTERSTELLAR_MATTER = 20
    EMISSION_OBJECT = 21
    BL_LACERTAE_OBJECT = 22
    BLAZAR = 23
    MOLECULAR_CLOUD = 24
    YOUNG_STELLAR_OBJECT = 25
    POSSIBLE_QUASAR = 26
    POSSIBLE_PLANETARY_NEBULA = 27
    PROTOPLANETARY_NEBULA = 28
    STAR = 29
    SYMBIOTIC_STAR = 30
    EMISSION_LINE_STAR = 31
    SUPERNOVA_CANDIDATE = 32
    SUPERNOVA_REMNANT_CANDIDATE = 33
    CLUSTER_OF_GALAXIES = 34
    PART_OF_GALAXY = 35
    REGION_OF_THE_SKY = 36


# Letter codes written in the type column of the text deep-sky catalog
STELLARIUM_TYPE_CODES: Dict[str, SkyObjectType] = {
    'G': SkyObjectType.GALAXY,
    'AG': SkyObjectType.ACTIVE_GALAXY,
    'RG': SkyObjectType.RADIO_GALAXY,
    'IG': SkyObjectType.INTERACTING_GALAXY,
    'Q': SkyObjectType.QUASAR,
    'SC': SkyObjectType.STAR_CLUSTER,
    'OC': SkyObjectType.OPEN_STAR_CLUSTER,
    'GC': SkyObjectType.GLOBULAR_STAR_CLUSTER,
    'SA': SkyObjectType.STELLAR_ASSOCIATION,
    'SCL': SkyObjectType.STAR_CLOUD,
    'N': SkyObjectType.NEBULA,
    'PN': SkyObjectType.PLANETARY_NEBULA,
    'DN': SkyObjectType.DARK_NEBULA,
    'RN': SkyObjectType.REFLECTION_NEBULA,
    'BN': SkyObjectType.BIPOLAR_NEBULA,
    'EN': SkyObjectType.EMISSION_NEBULA,
    'CAN': SkyObjectType.CLUSTER_ASSOCIATED_WITH_NEBULOSITY,
    'HII': SkyObjectType.HII_REGION,
    'SNR': SkyObjectType.SUPERNOVA_REMNANT,
    'ISM': SkyObjectType.INTERSTELLAR_MATTER,
    'EO': SkyObjectType.EMISSION_OBJECT,
    'BL': SkyObjectType.BL_LACERTAE_OBJECT,
    'BLZ': SkyObjectType.BLAZAR,
    'MCL': SkyObjectType.MOLECULAR_CLOUD,
    'YSO': SkyObjectType.YOUNG_STELLAR_OBJECT,
    'PQ': SkyObjectType.POSSIBLE_QUASAR,
    'PPN?': SkyObjectType.POSSIBLE_PLANETARY_NEBULA,
    'PPN': SkyObjectType.PROTOPLANETARY_NEBULA,
    'S': SkyObjectType.STAR,
    'SYS': SkyObjectType.SYMBIOTIC_STAR,
    'ELS': SkyObjectType.EMISSION_LINE_STAR,
    'SNC': SkyObjectType.SUPERNOVA_CANDIDATE,
    'SNRC': SkyObjectType.SUPERNOVA_REMNANT_CANDIDATE,
    'CG': SkyObjectType.CLUSTER_OF_GALAXIES,
    'PG': SkyObjectType.PART_OF_GALAXY,
    'RS': SkyObjectType.REGION_OF_THE_SKY,
}


# Prefixes used by the names reference file (names.dat)
NAMES_PREFIX_CATALOGS: Dict[str, CatalogType] = {
    'NAME': CatalogType.NAME,
    'NGC': CatalogType.NGC,
    'IC': CatalogType.IC,
    'BAYER': CatalogType.BAYER,
    'FLAMSTEED': CatalogType.FLAMSTEED,
    'HD': CatalogType.HD,
    'HR': CatalogType.HR,
    'HIP': CatalogType.HIP,
    'M': CatalogType.MESSIER,
    'C': CatalogType.CALDWELL,
    'B': CatalogType.BARNARD,
    'SH2': CatalogType.SHARPLESS,
    'LBN': CatalogType.LBN,
    'LDN': CatalogType.LDN,
    'CR': CatalogType.COLLINDER,
    'MEL': CatalogType.MELOTTE,
    'ARP': CatalogType.ARP,
    'ABELL': CatalogType.ABELL,
    'PGC': CatalogType.PGC,
    'TR': CatalogType.TRUMPLER,
    'ST': CatalogType.STOCK,
    'RU': CatalogType.RUPRECHT,
    'UGC': CatalogType.UGC,
    'CED': CatalogType.CED,
    'RCW': CatalogType.RCW,
    'VDB': CatalogType.VDB,
    'VV': CatalogType.VV,
    'PK': CatalogType.PK,
    'PNG': CatalogType.PNG,
    'ACO': CatalogType.ACO,
    'ESO': CatalogType.ESO,
    'SNRG': CatalogType.SNRG,
    'DWB': CatalogType.DWB,
    'BENNETT': CatalogType.BENNETT,
    'DUNLOP': CatalogType.DUNLOP,
    'HERSHEL': CatalogType.HERSCHEL,
    'GUM': CatalogType.GUM,
    'BOCHUM': CatalogType.BOCHUM,
}

# Open cluster discoverer names as they appear in SIMBAD "Cl <name> <id>" identifiers
CLUSTER_DISCOVERER_CATALOGS: Dict[str, CatalogType] = {
    'Alessi': CatalogType.ALESSI,
    'Alicante': CatalogType.ALICANTE,
    'Alter': CatalogType.ALTER,
    'Antalova': CatalogType.ANTALOVA,
    'Apriamaswili': CatalogType.APRIAMASWILI,
    'Arp': CatalogType.CL_ARP,
    'Barhatova': CatalogType.BARHATOVA,
    'Basel': CatalogType.BASEL,
    'Berkeley': CatalogType.BERKELEY,
    'Bica': CatalogType.BICA,
    'Biurakan': CatalogType.BIURAKAN,
    'Blanco': CatalogType.BLANCO,
    'Bochum': CatalogType.BOCHUM,
    'Chupina': CatalogType.CHUPINA,
    'Czernik': CatalogType.CZERNIK,
    'Danks': CatalogType.DANKS,
    'Dias': CatalogType.DIAS,
    'Djorg': CatalogType.DJORG,
    'Dolidze-Dzim': CatalogType.DOLIDZE_DZIM,
    'Dolidze': CatalogType.DOLIDZE,
    'Dufay': CatalogType.DUFAY,
    'Feinstein': CatalogType.FEINSTEIN,
    'Ferrero': CatalogType.FERRERO,
    'Graff': CatalogType.GRAFF,
    'Gulliver': CatalogType.GULLIVER,
    'Haffner': CatalogType.HAFFNER,
    'Harvard': CatalogType.HARVARD,
    'Haute-Provence': CatalogType.HAUTE_PROVENCE,
    'Hogg': CatalogType.HOGG,
    'Iskurzdajan': CatalogType.ISKURZDAJAN,
    'Johansson': CatalogType.JOHANSSON,
    'Kharchenko': CatalogType.KHARCHENKO,
    'King': CatalogType.KING,
    'Kron': CatalogType.KRON,
    'Lindsay': CatalogType.LINDSAY,
    'Loden': CatalogType.LODEN,
    'Lynga': CatalogType.LYNGA,
    'Mamajek': CatalogType.MAMAJEK,
    'Moffat': CatalogType.MOFFAT,
    'Mrk': CatalogType.MRK,
    'Pal': CatalogType.PAL,
    'Pismis': CatalogType.PISMIS,
    'Platais': CatalogType.PLATAIS,
    'Roslund': CatalogType.ROSLUND,
    'Saurer': CatalogType.SAURER,
    'Sher': CatalogType.SHER,
    'Skiff': CatalogType.SKIFF,
    'Stephenson': CatalogType.STEPHENSON,
    'Terzan': CatalogType.TERZAN,
    'Tombaugh': CatalogType.TOMBAUGH,
    'Turner': CatalogType.TURNER,
    'Upgren': CatalogType.UPGREN,
    'Waterloo': CatalogType.WATERLOO,
    'Westerlund': CatalogType.WESTERLUND,
    'Zwicky': CatalogType.ZWICKY,
}

# Catalogs too noisy to be used as a primary designation; they still take
# part in name and cross-reference lookups
SECONDARY_ONLY_CATALOGS: FrozenSet[CatalogType] = frozenset({
    CatalogType.UGC,
    CatalogType.VV,
    CatalogType.PK,
    CatalogType.PNG,
    CatalogType.SNRG,
    CatalogType.ESO,
    CatalogType.DWB,
})

# Object types whose source type string is worth keeping (stellar spectral
# types and galaxy morphologies)
SPECTRAL_TYPE_OBJECT_TYPES: FrozenSet[SkyObjectType] = frozenset({
    SkyObjectType.GALAXY,
    SkyObjectType.ACTIVE_GALAXY,
    SkyObjectType.RADIO_GALAXY,
    SkyObjectType.INTERACTING_GALAXY,
    SkyObjectType.EMISSION_OBJECT,
    SkyObjectType.BL_LACERTAE_OBJECT,
    SkyObjectType.BLAZAR,
    SkyObjectType.STAR,
    SkyObjectType.CLUSTER_OF_GALAXIES,
})


def catalog_for_prefix(prefix: str) -> CatalogType:
    """Map a names reference prefix to its catalog, or ``CatalogType.NONE``."""
    return NAMES_PREFIX_CATALOGS.get(prefix.strip().upper(), CatalogType.NONE)
