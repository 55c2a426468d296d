"""
Orchestrator for the object database build.

The build runs three phases strictly in sequence against a freshly created
store: stars from HYG, deep-sky objects from Stellarium and star clusters
from SIMBAD. Each phase owns a disjoint id range, so the same inputs always
produce the same database.
"""

import logging
import math
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

import astropy.units as u

from ..catalogs.cross_reference import CrossReferenceTables
from ..catalogs.name_index import NameIndex
from ..catalogs.taxonomy import CatalogType, SkyObjectType
from ..config import (
    CLUSTER_ID_OFFSET, CONSTELLATION_BATCH_SIZE, DSO_ID_OFFSET, SIMBAD_GLOBULAR_CLUSTER_OTYPE,
    SIMBAD_OPEN_CLUSTER_OTYPE, SIMBAD_STAR_CLUSTER_OTYPE, STAR_ID_LIMIT, STAR_MAX_MAGNITUDE, UNKNOWN_MAGNITUDE
)
from ..core.cluster_identifiers import IdentifierKind, first_of_kind, parse_identifiers
from ..core.constellations import CONSTELLATIONS, constellations_at
from ..core.merge import MergeEngine, derive_magnitude
from ..data.hyg_source import KM_PER_S_TO_AU_PER_DAY, read_hyg_catalog
from ..data.records import DSO_DESIGNATION_FIELDS, ClusterRow, DsoRecord, StarRecord
from ..data.simbad_source import SimbadClusterQuery
from ..data.stellarium_source import read_stellarium_catalog, read_stellarium_names
from ..exceptions import CatalogBuildError, SimbadQueryError, SkyAtlasError, UnrecognizedRecordError
from ..store.database import SkyObjectStore

log = logging.getLogger(__name__)

MILLIARCSECOND_TO_RADIAN = (1 * u.mas).to_value(u.rad)

ClusterQuery = Callable[[], Sequence[ClusterRow]]


def cluster_object_type(otype: str) -> SkyObjectType:
    """Map a SIMBAD cluster object type to a SkyObjectType."""
    if otype == SIMBAD_OPEN_CLUSTER_OTYPE:
        return SkyObjectType.OPEN_STAR_CLUSTER
    if otype == SIMBAD_GLOBULAR_CLUSTER_OTYPE:
        return SkyObjectType.GLOBULAR_STAR_CLUSTER
    if otype == SIMBAD_STAR_CLUSTER_OTYPE:
        return SkyObjectType.STAR_CLUSTER
    return SkyObjectType.STELLAR_ASSOCIATION


def cluster_magnitude(row: ClusterRow) -> float:
    """V magnitude when known, else the brightest of B, J and H (99 when none is known)."""
    if row.v_magnitude is not None and row.v_magnitude < UNKNOWN_MAGNITUDE:
        return row.v_magnitude

    others = [m for m in (row.b_magnitude, row.j_magnitude, row.h_magnitude) if m is not None]
    return min(others, default=UNKNOWN_MAGNITUDE)


def cluster_distance(parallax_mas: Optional[float]) -> float:
    """Distance in AU from a parallax in milliarcseconds; 0 when the parallax is missing or zero."""
    if not parallax_mas:
        return 0.0
    return 1.0 / abs(parallax_mas * MILLIARCSECOND_TO_RADIAN)


class CatalogBuildPipeline:
    """
    Builds the object database from the local catalogs and SIMBAD.

    Workflow:
    1. Load the name index and create an empty store
    2. STAR phase: named stars from HYG
    3. DSO phase: Stellarium deep-sky objects that resolve at least one name
    4. CLUSTER phase: SIMBAD clusters, merged into existing NGC/IC objects
       where possible
    5. Index and compact the store
    """

    def __init__(self,
                 config: Dict[str, Any],
                 cluster_query: Optional[ClusterQuery] = None,
                 cross_references: Optional[CrossReferenceTables] = None):
        """
        Initialize the build pipeline.

        Args:
            config: Dictionary with configuration parameters:
                - hyg_file: Path to the HYG CSV catalog
                - catalog_file: Path to the Stellarium catalog.txt
                - names_file: Path to the Stellarium names.dat
                - output_path: Path of the SQLite database to (re)create
                - query_clusters: Run the SIMBAD cluster phase (default True)
            cluster_query: Callable returning the cluster rows; defaults to
                a live SIMBAD query
            cross_references: Observing-list tables; defaults to the shipped ones
        """
        self.config = config
        self.cluster_query = cluster_query or SimbadClusterQuery()
        self.cross_references = cross_references or CrossReferenceTables.default()
        self.name_index: Optional[NameIndex] = None
        self.store: Optional[SkyObjectStore] = None
        self.engine: Optional[MergeEngine] = None
        self.cluster_counter = 0
        self.pending_objects: List[Dict[str, Any]] = []
        self.stats: Dict[str, int] = {}
        self._reset_statistics()

    def _reset_statistics(self) -> None:
        self.stats = {
            'stars_inserted': 0,
            'stars_skipped': 0,
            'stars_rejected': 0,
            'dsos_inserted': 0,
            'dsos_discarded': 0,
            'dsos_unknown': 0,
            'dsos_rejected': 0,
            'clusters_created': 0,
            'clusters_merged': 0,
            'clusters_invalid': 0,
            'clusters_unknown_discoverer': 0,
            'cluster_query_failed': 0,
            'objects': 0,
            'names': 0,
        }

    def run(self) -> None:
        """
        Execute the complete build.

        Raises:
            SourceUnavailableError: If an input catalog cannot be opened
            StoreError: If the output database cannot be created or written
            CatalogBuildError: If the build fails for any other reason
        """
        try:
            log.info("Starting object database build")

            self.open()

            self.run_star_phase(read_hyg_catalog(self.config['hyg_file']))
            self.run_dso_phase(read_stellarium_catalog(self.config['catalog_file']))

            if self.config.get('query_clusters', True):
                self._query_and_run_cluster_phase()
            else:
                log.info("Star cluster phase disabled")

            self.finalize()

            log.info("Object database build finished successfully")

        except SkyAtlasError:
            raise
        except Exception as e:
            raise CatalogBuildError(f"Build failed: {e}") from e
        finally:
            self.close()

    def open(self, name_index: Optional[NameIndex] = None) -> None:
        """
        Prepare a build: load the name index (unless given) and create the store.

        Raises:
            SourceUnavailableError: If the names reference cannot be opened
            StoreError: If the database cannot be created
        """
        self._reset_statistics()
        self.cluster_counter = 0
        self.pending_objects = []

        if name_index is None:
            name_index = NameIndex.from_records(read_stellarium_names(self.config['names_file']))
        self.name_index = name_index

        self.store = SkyObjectStore(self.config['output_path']).create()
        self.engine = MergeEngine(self.store, self.name_index, self.cross_references)

    def finalize(self) -> None:
        """Index and compact the store and record the final row counts."""
        self.store.finalize()
        self.stats['objects'] = self.store.count_objects()
        self.stats['names'] = self.store.count_names()

    def close(self) -> None:
        if self.store is not None:
            self.store.close()

    def _require_engine(self) -> MergeEngine:
        if self.engine is None:
            raise CatalogBuildError("Pipeline is not open; call open() before running a phase")
        return self.engine

    def _queue_object(self, engine: MergeEngine, **fields) -> None:
        """Hold an object until its constellation can be looked up with a batch of others."""
        self.pending_objects.append(fields)
        if len(self.pending_objects) >= CONSTELLATION_BATCH_SIZE:
            self._flush_objects(engine)

    def _flush_objects(self, engine: MergeEngine) -> None:
        if not self.pending_objects:
            return

        pending, self.pending_objects = self.pending_objects, []
        indexes = constellations_at([fields['ra'] for fields in pending], [fields['dec'] for fields in pending])
        for fields, index in zip(pending, indexes):
            engine.add_object(constellation=CONSTELLATIONS[index], **fields)

        log.debug(f"Wrote {len(pending)} queued objects")

    # === STAR phase ===

    def run_star_phase(self, records: Iterable[StarRecord]) -> None:
        """Insert named stars brighter than the magnitude limit together with their designations."""
        engine = self._require_engine()
        log.info("STAR phase: reading stellar catalog")

        for record in records:
            try:
                self._add_star(engine, record)
            except UnrecognizedRecordError as e:
                log.warning(f"Skipping star: {e}")
                self.stats['stars_rejected'] += 1

        self.store.commit()
        log.info(f"STAR phase finished: {self.stats['stars_inserted']} stars inserted, "
                 f"{self.stats['stars_skipped']} skipped, {self.stats['stars_rejected']} rejected")

    def _add_star(self, engine: MergeEngine, record: StarRecord) -> None:
        if record.id >= STAR_ID_LIMIT:
            raise UnrecognizedRecordError(f"Star id {record.id} outside the stellar id range")

        if record.id <= 0 or record.magnitude > STAR_MAX_MAGNITUDE or not (
                record.bayer or record.flamsteed or record.name):
            self.stats['stars_skipped'] += 1
            return

        designations = (
            (CatalogType.NAME, record.name),
            (CatalogType.BAYER, record.bayer),
            (CatalogType.FLAMSTEED, record.flamsteed),
            (CatalogType.HD, record.hd),
            (CatalogType.HIP, record.hip),
            (CatalogType.HR, record.hr),
        )
        for catalog_type, designation in designations:
            if designation:
                engine.add_name(record.id, catalog_type, designation)

        engine.add_object(
            record.id,
            SkyObjectType.STAR,
            record.ra,
            record.dec,
            record.magnitude,
            pm_ra=record.pm_ra,
            pm_dec=record.pm_dec,
            distance=record.distance,
            rv=record.rv,
            spectral_type=record.spectral_type,
            constellation=record.constellation,
        )
        self.stats['stars_inserted'] += 1

    # === DSO phase ===

    def run_dso_phase(self, records: Iterable[DsoRecord]) -> None:
        """Insert deep-sky objects that resolve at least one name."""
        engine = self._require_engine()
        log.info("DSO phase: reading deep-sky catalog")

        for record in records:
            try:
                self._add_dso(engine, record)
            except UnrecognizedRecordError as e:
                log.warning(f"Skipping deep-sky object: {e}")
                self.stats['dsos_rejected'] += 1

        self._flush_objects(engine)
        self.store.commit()
        log.info(f"DSO phase finished: {self.stats['dsos_inserted']} objects inserted, "
                 f"{self.stats['dsos_discarded']} without names, {self.stats['dsos_unknown']} of unknown type, "
                 f"{self.stats['dsos_rejected']} rejected")

    def _add_dso(self, engine: MergeEngine, record: DsoRecord) -> None:
        if record.object_type == SkyObjectType.UNKNOWN:
            log.warning(f"Skipping deep-sky object {record.id} of unknown type")
            self.stats['dsos_unknown'] += 1
            return

        if record.id < 0 or record.id >= CLUSTER_ID_OFFSET - DSO_ID_OFFSET:
            raise UnrecognizedRecordError(f"Deep-sky id {record.id} outside the deep-sky id range")

        object_id = DSO_ID_OFFSET + record.id

        # Names filed under no catalog are keyed by the object id
        found = engine.attach_names_for_identifier(object_id, CatalogType.NONE, str(object_id))

        for field, catalog_type in DSO_DESIGNATION_FIELDS:
            designation = getattr(record, field)
            if designation:
                attached = engine.attach_names_for_identifier(object_id, catalog_type, designation)
                found = attached or found

        if not found:
            log.debug(f"Discarding deep-sky object {record.id}: no designation resolved")
            self.stats['dsos_discarded'] += 1
            return

        self._queue_object(
            engine,
            object_id=object_id,
            object_type=record.object_type,
            ra=record.ra,
            dec=record.dec,
            magnitude=derive_magnitude(record.object_type, record.visual_magnitude, record.blue_magnitude),
            distance=record.distance,
            spectral_type=record.morphological_type,
        )
        self.stats['dsos_inserted'] += 1

    # === CLUSTER phase ===

    def _query_and_run_cluster_phase(self) -> None:
        try:
            rows = self.cluster_query()
        except SimbadQueryError as e:
            log.error(f"CLUSTER phase skipped: {e}")
            self.stats['cluster_query_failed'] = 1
            return

        self.run_cluster_phase(rows)

    def run_cluster_phase(self, rows: Iterable[ClusterRow]) -> None:
        """Attach discoverer designations to existing NGC/IC objects or create new cluster objects."""
        engine = self._require_engine()
        log.info("CLUSTER phase: merging star clusters")

        for row in rows:
            self._add_cluster(engine, row)

        self._flush_objects(engine)
        self.store.commit()
        log.info(f"CLUSTER phase finished: {self.stats['clusters_created']} created, "
                 f"{self.stats['clusters_merged']} merged, {self.stats['clusters_invalid']} without designation, "
                 f"{self.stats['clusters_unknown_discoverer']} with unknown discoverer")

    def _add_cluster(self, engine: MergeEngine, row: ClusterRow) -> None:
        identifiers = parse_identifiers(row.identifiers)
        discoverer = first_of_kind(identifiers, IdentifierKind.DISCOVERER)

        if discoverer is None:
            log.warning(f"Invalid star cluster name: {row.identifiers}")
            self.stats['clusters_invalid'] += 1
            return

        if not discoverer.is_known:
            log.debug(f"Unknown star cluster discoverer {discoverer.name!r} (SIMBAD oid {row.oid})")
            self.stats['clusters_unknown_discoverer'] += 1
            return

        object_id = self._find_backing_object(identifiers, row)

        if object_id is not None:
            self.stats['clusters_merged'] += 1
        else:
            object_id = CLUSTER_ID_OFFSET + self.cluster_counter
            dec = math.radians(row.dec_deg)
            self._queue_object(
                engine,
                object_id=object_id,
                object_type=cluster_object_type(row.otype),
                ra=math.radians(row.ra_deg),
                dec=dec,
                magnitude=cluster_magnitude(row),
                pm_ra=(row.pm_ra_mas or 0.0) * MILLIARCSECOND_TO_RADIAN / math.cos(dec),
                pm_dec=(row.pm_dec_mas or 0.0) * MILLIARCSECOND_TO_RADIAN,
                distance=cluster_distance(row.parallax_mas),
                rv=(row.radial_velocity_kms or 0.0) * KM_PER_S_TO_AU_PER_DAY,
            )
            self.cluster_counter += 1
            self.stats['clusters_created'] += 1

        engine.add_name(object_id, discoverer.catalog, discoverer.designation)

    def _find_backing_object(self, identifiers, row: ClusterRow) -> Optional[int]:
        for kind in (IdentifierKind.NGC_REF, IdentifierKind.IC_REF):
            reference = first_of_kind(identifiers, kind)
            if reference is None:
                continue
            object_id = self.store.find_object_id(reference.catalog, reference.designation)
            if object_id is not None:
                return object_id
            log.info(f"{reference.name} {reference.designation} not in database (SIMBAD oid {row.oid})")
        return None

    def get_statistics(self) -> Dict[str, int]:
        """Get build statistics."""
        return dict(self.stats)
