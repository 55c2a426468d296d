"""
Tests for the three-phase build pipeline.

Each test writes small HYG / Stellarium inputs to a temporary directory
and replaces the SIMBAD query with an in-memory list of cluster rows.
"""

import math
import sqlite3
from unittest.mock import patch

import pytest

from skyatlas.builder.pipeline import (
    MILLIARCSECOND_TO_RADIAN, CatalogBuildPipeline, cluster_distance, cluster_magnitude, cluster_object_type
)
from skyatlas.catalogs.name_index import NameIndex
from skyatlas.catalogs.taxonomy import CatalogType, SkyObjectType
from skyatlas.config import HYG_COLUMNS, STELLARIUM_CATALOG_COLUMNS
from skyatlas.core.constellations import constellations_at
from skyatlas.data.hyg_source import KM_PER_S_TO_AU_PER_DAY, PARSEC_TO_AU
from skyatlas.data.records import ClusterRow, StarRecord
from skyatlas.exceptions import CatalogBuildError, SimbadQueryError, SourceUnavailableError
from skyatlas.store.database import SkyObjectStore

SIRIUS = {
    'id': 1, 'hip': 32349, 'hd': 48915, 'hr': 2491, 'proper': 'Sirius', 'bayer': 'Alp', 'flam': 9,
    'con': 'CMa', 'mag': 5.0, 'dist': 2.6371, 'rv': -5.5, 'spect': 'A0m...',
    'rarad': 1.767791, 'decrad': -0.291751, 'pmrarad': -2.6471e-06, 'pmdecrad': -5.9296e-06,
}


def hyg_text(*rows) -> str:
    lines = [','.join(HYG_COLUMNS)]
    for row in rows:
        lines.append(','.join(str(row.get(column, '')) for column in HYG_COLUMNS))
    return '\n'.join(lines) + '\n'


def catalog_text(*rows) -> str:
    """catalog.txt content; every row is a dict of column values, the rest default to 0."""
    lines = ['## id ra dec ...']
    for row in rows:
        values = {'ra': '10.0', 'dec': '20.0', 'bmag': '99', 'vmag': '99', 'type': '1', 'mtype': ''}
        values.update({key: str(value) for key, value in row.items()})
        lines.append('\t'.join(values.get(column, '0') for column in STELLARIUM_CATALOG_COLUMNS))
    return '\n'.join(lines) + '\n'


class FakeClusterQuery:
    """Stands in for the SIMBAD query and records how often it was called."""

    def __init__(self, rows=(), error=None):
        self.rows = list(rows)
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.rows


@pytest.fixture
def build(tmp_path):
    """Return a function that writes the inputs, runs a build and returns (pipeline, store path)."""

    def _build(stars=(), dsos=(), names='', clusters=(), query=None, query_clusters=True,
               output='objects.sqlite'):
        (tmp_path / 'hyg.csv').write_text(hyg_text(*stars), encoding='utf-8')
        (tmp_path / 'catalog.txt').write_text(catalog_text(*dsos), encoding='utf-8')
        (tmp_path / 'names.dat').write_text(names, encoding='utf-8')

        config = {
            'hyg_file': str(tmp_path / 'hyg.csv'),
            'catalog_file': str(tmp_path / 'catalog.txt'),
            'names_file': str(tmp_path / 'names.dat'),
            'output_path': str(tmp_path / output),
            'query_clusters': query_clusters,
        }
        pipeline = CatalogBuildPipeline(config, cluster_query=query or FakeClusterQuery(clusters))
        pipeline.run()
        return pipeline, tmp_path / output

    return _build


def fetch_all(path):
    conn = sqlite3.connect(str(path))
    try:
        objects = conn.execute('SELECT * FROM objects ORDER BY id').fetchall()
        names = conn.execute('SELECT * FROM names ORDER BY objectId, catalogType, name').fetchall()
    finally:
        conn.close()
    return objects, names


def names_of(path, object_id):
    with SkyObjectStore(str(path)).open_existing() as store:
        return store.fetch_names(object_id)


def object_of(path, object_id):
    with SkyObjectStore(str(path)).open_existing() as store:
        return store.fetch_object(object_id)


class TestStarPhase:

    def test_single_star_end_to_end(self, build):
        star = {'id': 1, 'mag': 5, 'bayer': 'Alp', 'proper': 'Sirius', 'rarad': 1.767791, 'decrad': -0.291751}
        pipeline, path = build(stars=[star])

        objects, names = fetch_all(path)
        assert [row[0] for row in objects] == [1]
        assert (1, int(CatalogType.BAYER), 'Alp') in names
        assert (1, int(CatalogType.NAME), 'Sirius') in names
        assert len(names) == 2
        assert pipeline.get_statistics()['stars_inserted'] == 1

    def test_star_fields(self, build):
        _, path = build(stars=[SIRIUS])

        sirius = object_of(path, 1)
        assert sirius.object_type == SkyObjectType.STAR
        assert sirius.magnitude == 5.0
        assert sirius.constellation == 13
        assert sirius.spectral_type == 'A0m...'
        assert sirius.rv == pytest.approx(-5.5 * KM_PER_S_TO_AU_PER_DAY)
        assert sirius.distance == round(2.6371 * PARSEC_TO_AU)
        assert names_of(path, 1) == [
            (CatalogType.NAME, 'Sirius'),
            (CatalogType.BAYER, 'Alp'),
            (CatalogType.FLAMSTEED, '9'),
            (CatalogType.HD, '48915'),
            (CatalogType.HR, '2491'),
            (CatalogType.HIP, '32349'),
        ]

    def test_filters(self, build):
        stars = [
            dict(SIRIUS, id=0, proper='Sol'),                       # the Sun
            dict(SIRIUS, id=2, mag=7.5),                            # too faint
            dict(SIRIUS, id=3, proper='', bayer='', flam=''),        # no usable designation
            dict(SIRIUS, id=4, mag=7.0, proper='', bayer='', flam=12),
        ]
        pipeline, path = build(stars=stars)

        objects, _ = fetch_all(path)
        assert [row[0] for row in objects] == [4]
        assert pipeline.get_statistics()['stars_skipped'] == 3

    def test_spectral_type_filter(self, build):
        _, path = build(stars=[dict(SIRIUS, spect='-')])
        assert object_of(path, 1).spectral_type is None

    def test_out_of_range_id_rejected(self, tmp_path):
        pipeline = CatalogBuildPipeline({'output_path': str(tmp_path / 'objects.sqlite')})
        pipeline.open(name_index=NameIndex([]))
        try:
            record = StarRecord(id=1_000_000, ra=0.1, dec=0.1, magnitude=1.0, name='Too Big')
            pipeline.run_star_phase([record])
            assert pipeline.store.count_objects() == 0
            assert pipeline.get_statistics()['stars_rejected'] == 1
        finally:
            pipeline.close()


class TestDsoPhase:

    def test_cross_reference_propagation(self, build):
        _, path = build(dsos=[{'id': 35, 'ra': 3.7233, 'dec': -39.1967, 'type': 1, 'ngc': 55,
                               'bmag': 8.42, 'vmag': 7.87, 'mtype': 'SB(s)m'}])

        assert names_of(path, 1_000_035) == [
            (CatalogType.NGC, '55'),
            (CatalogType.BENNETT, '1'),
            (CatalogType.DUNLOP, '507'),
        ]
        galaxy = object_of(path, 1_000_035)
        assert galaxy.magnitude == 7.87
        assert galaxy.spectral_type == 'SB(s)m'
        assert galaxy.pm_ra == 0.0
        assert galaxy.rv == 0.0

    def test_magnitude_policy(self, build):
        dsos = [
            {'id': 1, 'type': int(SkyObjectType.DARK_NEBULA), 'vmag': 5, 'ldn': 1622},
            {'id': 2, 'type': int(SkyObjectType.GALAXY), 'bmag': 10, 'vmag': 9, 'ngc': 891},
            {'id': 3, 'type': int(SkyObjectType.GALAXY), 'bmag': 10, 'ngc': 892},
        ]
        _, path = build(dsos=dsos)

        assert object_of(path, 1_000_001).magnitude == 94.0
        assert object_of(path, 1_000_002).magnitude == 9.0
        assert object_of(path, 1_000_003).magnitude == 99.0

    def test_unresolved_objects_discarded(self, build):
        dsos = [
            {'id': 1},                                      # no designation at all
            {'id': 2, 'ugc': 12345, 'pk': '120+09.1'},      # secondary-only designations
            {'id': 3, 'type': 0, 'ngc': 1},                 # unknown type
            {'id': 4, 'ic': 1396},
        ]
        pipeline, path = build(dsos=dsos)

        objects, names = fetch_all(path)
        assert [row[0] for row in objects] == [1_000_004]
        assert {row[0] for row in names} == {1_000_004}

        stats = pipeline.get_statistics()
        assert stats['dsos_inserted'] == 1
        assert stats['dsos_discarded'] == 2
        assert stats['dsos_unknown'] == 1

    def test_common_names_resolve_objects(self, build):
        names = (
            'UGC 12345 _("Some Galaxy")\n'
            'FOO 1000002 _("Mystery Cloud")\n'
            'IC 342 _("Maffei Galaxy")\n'
        )
        dsos = [
            {'id': 1, 'ugc': 12345},
            {'id': 2},
            {'id': 3, 'ic': 342},
        ]
        _, path = build(dsos=dsos, names=names)

        assert names_of(path, 1_000_001) == [(CatalogType.NAME, 'Some Galaxy')]
        assert names_of(path, 1_000_002) == [(CatalogType.NAME, 'Mystery Cloud')]
        assert names_of(path, 1_000_003) == [
            (CatalogType.NAME, 'Hidden Galaxy'),
            (CatalogType.NAME, 'Maffei Galaxy'),
            (CatalogType.IC, '342'),
        ]

    def test_every_designation_is_tried(self, build):
        _, path = build(dsos=[{'id': 5, 'ngc': 6514, 'm': 20, 'b': 85, 'sh2': 30}])

        names = names_of(path, 1_000_005)
        assert (CatalogType.NGC, '6514') in names
        assert (CatalogType.GUM, '76') in names
        assert (CatalogType.MESSIER, '20') in names
        assert (CatalogType.BARNARD, '85') in names
        assert (CatalogType.SHARPLESS, '30') in names

    def test_constellation_from_position(self, build):
        _, path = build(dsos=[{'id': 7, 'ra': 83.82, 'dec': -5.39, 'type': 16, 'm': 42}])
        assert object_of(path, 1_000_007).constellation == 59

    def test_constellations_looked_up_in_batches(self, build):
        dsos = [{'id': i, 'ngc': 100 + i} for i in range(1, 6)]

        with patch('skyatlas.builder.pipeline.CONSTELLATION_BATCH_SIZE', 2), \
                patch('skyatlas.builder.pipeline.constellations_at', wraps=constellations_at) as mock_lookup:
            pipeline, path = build(dsos=dsos)

        assert [len(call.args[0]) for call in mock_lookup.call_args_list] == [2, 2, 1]
        objects, _ = fetch_all(path)
        assert [row[0] for row in objects] == [1_000_001, 1_000_002, 1_000_003, 1_000_004, 1_000_005]
        assert pipeline.get_statistics()['dsos_inserted'] == 5


class TestClusterPhase:

    NGC_7822 = {'id': 100, 'ra': 0.05, 'dec': 67.6, 'type': int(SkyObjectType.NEBULA), 'ngc': 7822}
    IC_1396 = {'id': 101, 'ra': 324.7, 'dec': 57.5, 'type': int(SkyObjectType.NEBULA), 'ic': 1396}

    @staticmethod
    def row(oid, identifiers, otype='OpC', **values):
        return ClusterRow(oid=oid, ra_deg=values.pop('ra_deg', 30.0), dec_deg=values.pop('dec_deg', 60.0),
                          otype=otype, identifiers=identifiers, **values)

    def test_merge_into_existing_ngc_object(self, build):
        clusters = [self.row(1, 'Cl Berkeley 59|NGC 7822|C 0000+676')]
        pipeline, path = build(dsos=[self.NGC_7822], clusters=clusters)

        assert (CatalogType.BERKELEY, '59') in names_of(path, 1_000_100)
        objects, _ = fetch_all(path)
        assert [row[0] for row in objects] == [1_000_100]
        assert pipeline.get_statistics()['clusters_merged'] == 1

    def test_unknown_discoverer_not_merged(self, build):
        # Trumpler is a deep-sky catalog, not a cluster discoverer
        clusters = [self.row(1, 'Cl Trumpler 37|IC 1396')]
        pipeline, path = build(dsos=[self.IC_1396], clusters=clusters)

        assert names_of(path, 1_000_101) == [(CatalogType.IC, '1396')]
        assert pipeline.get_statistics()['clusters_unknown_discoverer'] == 1

    def test_ic_fallback(self, build):
        clusters = [self.row(1, 'Cl King 12|NGC 9999|IC 1396')]
        pipeline, path = build(dsos=[self.IC_1396], clusters=clusters)

        assert (CatalogType.KING, '12') in names_of(path, 1_000_101)
        assert pipeline.get_statistics()['clusters_merged'] == 1

    def test_new_clusters_and_counter(self, build):
        clusters = [
            self.row(1, 'Cl Bochum 2'),
            self.row(2, 'C 0001-123|2MASS J0000'),          # no discoverer designation
            self.row(3, 'Cl Collinder 399'),                 # unknown discoverer
            self.row(4, 'Cl Dolidze 25', otype='GlC'),
            self.row(5, 'Cl Pal 1', otype='Cl*'),
            self.row(6, 'Cl Mamajek 1', otype='As*'),
        ]
        pipeline, path = build(clusters=clusters)

        objects, _ = fetch_all(path)
        assert [row[0] for row in objects] == [2_000_000, 2_000_001, 2_000_002, 2_000_003]
        assert [row[1] for row in objects] == [
            int(SkyObjectType.OPEN_STAR_CLUSTER),
            int(SkyObjectType.GLOBULAR_STAR_CLUSTER),
            int(SkyObjectType.STAR_CLUSTER),
            int(SkyObjectType.STELLAR_ASSOCIATION),
        ]
        assert names_of(path, 2_000_000) == [(CatalogType.BOCHUM, '2')]
        assert names_of(path, 2_000_001) == [(CatalogType.DOLIDZE, '25')]

        stats = pipeline.get_statistics()
        assert stats['clusters_created'] == 4
        assert stats['clusters_invalid'] == 1
        assert stats['clusters_unknown_discoverer'] == 1

    def test_cluster_fields(self, build):
        clusters = [self.row(1, 'Cl Berkeley 1', dec_deg=60.0, pm_ra_mas=2.0, pm_dec_mas=-1.0,
                             parallax_mas=0.5, radial_velocity_kms=-20.0,
                             b_magnitude=12.5, j_magnitude=10.25, h_magnitude=10.5)]
        _, path = build(clusters=clusters)

        cluster = object_of(path, 2_000_000)
        assert cluster.ra == pytest.approx(math.radians(30.0))
        assert cluster.dec == pytest.approx(math.radians(60.0))
        assert cluster.pm_ra == pytest.approx(4.0 * MILLIARCSECOND_TO_RADIAN)
        assert cluster.pm_dec == pytest.approx(-MILLIARCSECOND_TO_RADIAN)
        assert cluster.distance == round(1 / (0.5 * MILLIARCSECOND_TO_RADIAN))
        assert cluster.rv == pytest.approx(-20.0 * KM_PER_S_TO_AU_PER_DAY)
        assert cluster.magnitude == 10.25
        assert cluster.spectral_type is None

    def test_query_failure_ends_only_cluster_phase(self, build):
        query = FakeClusterQuery(error=SimbadQueryError("timeout"))
        pipeline, path = build(stars=[SIRIUS], query=query)

        assert query.calls == 1
        stats = pipeline.get_statistics()
        assert stats['cluster_query_failed'] == 1
        assert stats['objects'] == 1

        conn = sqlite3.connect(str(path))
        try:
            indexes = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='index'")}
        finally:
            conn.close()
        assert 'idx_names_type_name' in indexes

    def test_skip_clusters(self, build):
        query = FakeClusterQuery([self.row(1, 'Cl Bochum 2')])
        pipeline, _ = build(stars=[SIRIUS], query=query, query_clusters=False)
        assert pipeline.get_statistics()['clusters_created'] == 0
        assert query.calls == 0


class TestClusterConversions:

    def test_object_types(self):
        assert cluster_object_type('OpC') == SkyObjectType.OPEN_STAR_CLUSTER
        assert cluster_object_type('GlC') == SkyObjectType.GLOBULAR_STAR_CLUSTER
        assert cluster_object_type('Cl*') == SkyObjectType.STAR_CLUSTER
        assert cluster_object_type('As*') == SkyObjectType.STELLAR_ASSOCIATION

    def test_magnitude(self):
        def row(**mags):
            return ClusterRow(oid=1, ra_deg=0, dec_deg=0, otype='OpC', identifiers='', **mags)

        assert cluster_magnitude(row(v_magnitude=8.0, b_magnitude=7.0)) == 8.0
        assert cluster_magnitude(row(b_magnitude=9.0, h_magnitude=7.5)) == 7.5
        assert cluster_magnitude(row()) == 99.0

    def test_distance(self):
        assert cluster_distance(None) == 0.0
        assert cluster_distance(0.0) == 0.0
        # 1 mas is 1 kpc
        assert cluster_distance(-1.0) == pytest.approx(206264806.2, rel=1e-6)


class TestBuild:

    DSOS = [
        {'id': 35, 'ra': 3.7233, 'dec': -39.1967, 'type': 1, 'ngc': 55, 'vmag': 7.87},
        {'id': 100, 'ra': 0.05, 'dec': 67.6, 'type': int(SkyObjectType.NEBULA), 'ngc': 7822},
    ]

    def clusters(self):
        return [
            TestClusterPhase.row(1, 'Cl Berkeley 59|NGC 7822'),
            TestClusterPhase.row(2, 'Cl Bochum 2'),
        ]

    def test_id_partition(self, build):
        _, path = build(stars=[SIRIUS], dsos=self.DSOS, clusters=self.clusters())

        objects, names = fetch_all(path)
        ids = [row[0] for row in objects]
        assert ids == [1, 1_000_035, 1_000_100, 2_000_000]
        for object_id, object_type, *_ in objects:
            if object_id < 1_000_000:
                assert object_type == int(SkyObjectType.STAR)
            elif object_id >= 2_000_000:
                assert object_type == int(SkyObjectType.OPEN_STAR_CLUSTER)

    def test_idempotent(self, build):
        _, first = build(stars=[SIRIUS], dsos=self.DSOS, clusters=self.clusters(), output='first.sqlite')
        _, second = build(stars=[SIRIUS], dsos=self.DSOS, clusters=self.clusters(), output='second.sqlite')

        assert fetch_all(first) == fetch_all(second)

    def test_rebuild_replaces_previous_output(self, build):
        build(stars=[SIRIUS], dsos=self.DSOS)
        _, path = build(stars=[SIRIUS])

        objects, _ = fetch_all(path)
        assert [row[0] for row in objects] == [1]

    def test_statistics(self, build):
        pipeline, _ = build(stars=[SIRIUS], dsos=self.DSOS, clusters=self.clusters())

        stats = pipeline.get_statistics()
        assert stats['stars_inserted'] == 1
        assert stats['dsos_inserted'] == 2
        assert stats['clusters_merged'] == 1
        assert stats['clusters_created'] == 1
        assert stats['objects'] == 4
        assert stats['names'] > 4

    def test_missing_source_aborts(self, tmp_path):
        config = {
            'hyg_file': str(tmp_path / 'missing.csv'),
            'catalog_file': str(tmp_path / 'catalog.txt'),
            'names_file': str(tmp_path / 'names.dat'),
            'output_path': str(tmp_path / 'objects.sqlite'),
        }
        (tmp_path / 'names.dat').write_text('', encoding='utf-8')

        pipeline = CatalogBuildPipeline(config, cluster_query=FakeClusterQuery())
        with pytest.raises(SourceUnavailableError):
            pipeline.run()

    def test_missing_names_file_aborts(self, tmp_path):
        config = {
            'hyg_file': str(tmp_path / 'hyg.csv'),
            'catalog_file': str(tmp_path / 'catalog.txt'),
            'names_file': str(tmp_path / 'names.dat'),
            'output_path': str(tmp_path / 'objects.sqlite'),
        }
        with pytest.raises(SourceUnavailableError):
            CatalogBuildPipeline(config, cluster_query=FakeClusterQuery()).run()

    def test_phase_requires_open(self, tmp_path):
        pipeline = CatalogBuildPipeline({'output_path': str(tmp_path / 'objects.sqlite')})
        with pytest.raises(CatalogBuildError):
            pipeline.run_star_phase([])
