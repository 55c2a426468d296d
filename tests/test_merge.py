"""
Tests for the merge engine.

The engine writes into a real temporary store and uses fixture name
index / cross-reference tables so results do not depend on shipped data.
"""

import math
from unittest.mock import patch

import pytest

from skyatlas.catalogs.cross_reference import CrossReferenceTables
from skyatlas.catalogs.name_index import NameIndex
from skyatlas.catalogs.taxonomy import CatalogType, SkyObjectType
from skyatlas.core.merge import MergeEngine, derive_magnitude, retain_spectral_type
from skyatlas.store.database import SkyObjectStore


@pytest.fixture
def store(tmp_path):
    store = SkyObjectStore(str(tmp_path / 'objects.sqlite')).create()
    yield store
    store.close()


@pytest.fixture
def engine(store):
    name_index = NameIndex([
        (CatalogType.NGC, '224', 'Andromeda Galaxy'),
        (CatalogType.UGC, '454', 'Andromeda Galaxy'),
        (CatalogType.NONE, '1000001', 'Orphan Nebula'),
    ])
    cross_references = CrossReferenceTables([
        (CatalogType.BENNETT, [('1', CatalogType.NGC, '55')]),
        (CatalogType.DUNLOP, [('507', CatalogType.NGC, '55')]),
        (CatalogType.GUM, [('72', CatalogType.MESSIER, '8')]),
    ])
    return MergeEngine(store, name_index, cross_references)


class TestDeriveMagnitude:

    def test_dark_nebula_is_inverted(self):
        assert derive_magnitude(SkyObjectType.DARK_NEBULA, 5.0) == 94.0

    def test_brighter_of_visual_and_blue(self):
        assert derive_magnitude(SkyObjectType.GALAXY, 9.0, 10.0) == 9.0
        assert derive_magnitude(SkyObjectType.GALAXY, 10.0, 9.5) == 9.5

    def test_unknown_visual_stays_unknown(self):
        assert derive_magnitude(SkyObjectType.GALAXY, 99.0, 8.0) == 99.0
        assert derive_magnitude(SkyObjectType.DARK_NEBULA, 99.0) == 99.0

    def test_blue_defaults_to_unknown(self):
        assert derive_magnitude(SkyObjectType.NEBULA, 7.5) == 7.5


class TestRetainSpectralType:

    def test_star(self):
        assert retain_spectral_type(SkyObjectType.STAR, 'G2V') == 'G2V'
        assert retain_spectral_type(SkyObjectType.STAR, '-') is None

    @pytest.mark.parametrize("object_type", [
        SkyObjectType.GALAXY, SkyObjectType.ACTIVE_GALAXY, SkyObjectType.RADIO_GALAXY,
        SkyObjectType.INTERACTING_GALAXY, SkyObjectType.EMISSION_OBJECT, SkyObjectType.BL_LACERTAE_OBJECT,
        SkyObjectType.BLAZAR, SkyObjectType.CLUSTER_OF_GALAXIES,
    ])
    def test_allowed_types(self, object_type):
        assert retain_spectral_type(object_type, 'SA(s)b') == 'SA(s)b'

    @pytest.mark.parametrize("object_type", [
        SkyObjectType.OPEN_STAR_CLUSTER, SkyObjectType.PLANETARY_NEBULA, SkyObjectType.DARK_NEBULA,
        SkyObjectType.UNKNOWN,
    ])
    def test_other_types_dropped(self, object_type):
        assert retain_spectral_type(object_type, 'II2m') is None

    @pytest.mark.parametrize("value", [None, '', '-', '-abc', '3', '1a'])
    def test_invalid_values(self, value):
        assert retain_spectral_type(SkyObjectType.GALAXY, value) is None


class TestAttachNames:

    def test_cross_references_and_self(self, engine, store):
        assert engine.attach_names_for_identifier(1000035, CatalogType.NGC, '55')

        assert store.fetch_names(1000035) == [
            (CatalogType.NGC, '55'),
            (CatalogType.BENNETT, '1'),
            (CatalogType.DUNLOP, '507'),
        ]

    def test_common_names(self, engine, store):
        assert engine.attach_names_for_identifier(1, CatalogType.NGC, '224')
        assert store.fetch_names(1) == [(CatalogType.NAME, 'Andromeda Galaxy'), (CatalogType.NGC, '224')]

    def test_self_only(self, engine, store):
        assert engine.attach_names_for_identifier(1, CatalogType.IC, '1396')
        assert store.fetch_names(1) == [(CatalogType.IC, '1396')]

    def test_attach_self_disabled(self, engine, store):
        assert not engine.attach_names_for_identifier(1, CatalogType.IC, '1396', attach_self=False)
        assert store.fetch_names(1) == []

    def test_secondary_only_catalog_never_attached(self, engine, store):
        # A UGC number with no names or cross references resolves nothing
        assert not engine.attach_names_for_identifier(1, CatalogType.UGC, '12345')
        assert store.fetch_names(1) == []

        # ...but its common names are still used
        assert engine.attach_names_for_identifier(2, CatalogType.UGC, '454')
        assert store.fetch_names(2) == [(CatalogType.NAME, 'Andromeda Galaxy')]

    def test_placeholder_catalog(self, engine, store):
        assert engine.attach_names_for_identifier(1000001, CatalogType.NONE, '1000001')
        assert store.fetch_names(1000001) == [(CatalogType.NAME, 'Orphan Nebula')]

        assert not engine.attach_names_for_identifier(1000002, CatalogType.NONE, '1000002')
        assert store.fetch_names(1000002) == []

    def test_repeated_attach_still_succeeds(self, engine, store):
        assert engine.attach_names_for_identifier(1, CatalogType.IC, '1396')
        assert engine.attach_names_for_identifier(1, CatalogType.IC, '1396')

        assert store.count_names() == 1
        assert engine.names_written == 1


class TestAddObject:

    def test_derived_fields(self, engine, store):
        assert engine.add_object(1, SkyObjectType.STAR, 1.7678, -0.2918, -1.4567,
                                 distance=-543210.6, spectral_type='A1V', constellation='CMa')

        stored = store.fetch_object(1)
        assert stored.magnitude == -1.46
        assert stored.distance == 543211
        assert stored.constellation == 13
        assert stored.spectral_type == 'A1V'

    def test_spectral_type_filtered(self, engine, store):
        engine.add_object(1, SkyObjectType.STAR, 0.1, 0.1, 5.0, spectral_type='-', constellation='Psc')
        assert store.fetch_object(1).spectral_type is None

    def test_constellation_from_position(self, engine, store):
        with patch('skyatlas.core.merge.resolve_constellation', return_value=59) as mock_resolve:
            engine.add_object(1000001, SkyObjectType.NEBULA, 1.46, -0.09, 4.0)

        mock_resolve.assert_called_once_with(1.46, -0.09, None)
        assert store.fetch_object(1000001).constellation == 59

    def test_first_writer_wins(self, engine, store):
        assert engine.add_object(1, SkyObjectType.STAR, 0.1, 0.1, 5.0, constellation='Psc')
        assert not engine.add_object(1, SkyObjectType.GALAXY, 0.2, 0.2, 1.0, constellation='And')

        stored = store.fetch_object(1)
        assert stored.object_type == SkyObjectType.STAR
        assert stored.magnitude == 5.0
        assert engine.objects_written == 1

    def test_real_position_lookup(self, engine, store):
        # M42 lies in Orion
        engine.add_object(1000002, SkyObjectType.EMISSION_NEBULA, math.radians(83.82), math.radians(-5.39), 4.0)
        assert store.fetch_object(1000002).constellation == 59
