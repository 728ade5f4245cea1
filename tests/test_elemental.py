"""Tests for elemental Options operations over profile collections."""

import io

import numpy as np
import pytest

import rt_options
from rt_options import Options, associated, create, define_version, destroy, equal, inspect, is_valid
from rt_options.options import MODULE_VERSION_ID


N_PROFILES = 4


@pytest.fixture
def profiles():
    """One default record per profile."""
    return [Options() for _ in range(N_PROFILES)]


class TestAssociated:
    """Tests for the elemental allocation query."""

    def test_single_record(self):
        """Test a single record gives a scalar."""
        result = associated(Options())
        assert result is False

    def test_collection(self, profiles):
        """Test a collection gives one flag per record."""
        profiles[1].create(3)
        result = associated(profiles)
        assert isinstance(result, np.ndarray)
        np.testing.assert_array_equal(result, [False, True, False, False])

    def test_object_array(self, profiles):
        """Test numpy object arrays of records."""
        array = np.empty(N_PROFILES, dtype=object)
        for i, record in enumerate(profiles):
            array[i] = record
        create(array, 2)
        assert np.all(associated(array))

    def test_empty_collection(self):
        """Test an empty collection."""
        assert associated([]).shape == (0,)


class TestCreateDestroy:
    """Tests for elemental create and destroy."""

    def test_create_scalar_count(self, profiles):
        """Test a scalar channel count applies to every record."""
        create(profiles, 5)
        for record in profiles:
            assert record.associated()
            assert record.n_channels == 5

    def test_create_per_record_counts(self, profiles):
        """Test per-record channel counts, with invalid counts skipped."""
        create(profiles, [1, 0, 3, -2])
        np.testing.assert_array_equal(associated(profiles), [True, False, True, False])
        assert [record.n_channels for record in profiles] == [1, 0, 3, 0]

    def test_create_single_record(self):
        """Test the elemental form on one record."""
        record = Options()
        create(record, 2)
        assert record.n_channels == 2

    def test_destroy(self, profiles):
        """Test every record is destroyed."""
        create(profiles, 3)
        destroy(profiles)
        assert not np.any(associated(profiles))
        destroy(profiles)
        assert all(record.n_channels == 0 for record in profiles)

    def test_profiles_independent(self, profiles):
        """Test records do not share storage after a collection create."""
        create(profiles, 2)
        profiles[0].emissivity = [0.5, 0.5]
        assert np.all(profiles[1].emissivity == 0.0)


class TestEqual:
    """Tests for elemental equality."""

    def test_single_records(self):
        """Test two single records give a scalar."""
        assert equal(Options(), Options()) is True

    def test_collections(self, profiles):
        """Test elementwise comparison of two collections."""
        others = [record.copy() for record in profiles]
        others[2].use_antenna_correction = True
        np.testing.assert_array_equal(equal(profiles, others), [True, True, False, True])

    def test_broadcast_single_record(self, profiles):
        """Test a single record is compared against every element."""
        profiles[3].aircraft_pressure = 500.0
        np.testing.assert_array_equal(
            equal(Options(), profiles), [True, True, True, False]
        )

    def test_symmetric(self, profiles):
        """Test elementwise equality is symmetric."""
        others = [Options() for _ in range(N_PROFILES)]
        create(others, [1, 2, 0, 0])
        np.testing.assert_array_equal(equal(profiles, others), equal(others, profiles))

    def test_mismatched_collections(self, profiles):
        """Test collections of different length cannot be compared."""
        with pytest.raises(ValueError):
            equal(profiles, profiles[:2])


class TestOtherOperations:
    """Tests for is_valid, inspect and define_version."""

    def test_is_valid(self):
        """Test the function form of the validator."""
        record = Options()
        assert is_valid(record)
        record.use_emissivity = True
        assert not is_valid(record)

    def test_inspect_collection(self, profiles):
        """Test every record of a collection is displayed."""
        stream = io.StringIO()
        inspect(profiles, stream)
        assert stream.getvalue().count("Options OBJECT") == N_PROFILES

    def test_profile_grid(self):
        """Test every elemental operation on a 2-D grid of records."""
        grid = np.empty((2, 3), dtype=object)
        for index in np.ndindex(grid.shape):
            grid[index] = Options()
        create(grid, 3)
        assert associated(grid).shape == (2, 3)
        assert associated(grid).all()
        assert equal(grid, grid).all()

        stream = io.StringIO()
        inspect(grid, stream)
        assert stream.getvalue().count("Options OBJECT") == grid.size

        destroy(grid)
        assert not associated(grid).any()

    def test_define_version(self):
        """Test the version identity is a fixed string."""
        assert define_version() == MODULE_VERSION_ID
        assert define_version() == define_version()
        assert isinstance(define_version(), str)

    def test_package_version(self):
        """Test the package exposes its version."""
        assert rt_options.__version__ == "0.1.0"
