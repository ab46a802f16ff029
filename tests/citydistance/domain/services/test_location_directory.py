"""
Unit tests for the LocationDirectory service.

Tests cover:
- Seeding from configuration
- Single and pair lookups
- NotFoundError reporting
"""
import pytest

from citydistance.domain.exceptions import NotFoundError, ValidationError
from citydistance.domain.models import Place
from citydistance.domain.services import LocationDirectory
from citydistance.domain.value_objects import City, Location
from citydistance.utils.config import DirectoryConfig


class TestLocationDirectorySeeding:
    """Test building the directory from configuration."""

    def test_packaged_seed_data(self, directory):
        assert len(directory) == 19
        assert sum(1 for place in directory if place.has_location) == 17
        assert City.create("Atlantis") in directory
        assert City.create("Camelot") in directory

    def test_cities_keep_seed_order(self, directory):
        assert directory.cities[0] == City.create("Beaumont, TX")
        assert directory.cities[-1] == City.create("Camelot")

    def test_from_config_validates_coordinates(self):
        config = DirectoryConfig(
            places=[{"name": "Nowhere", "latitude": 95.0, "longitude": 0.0}]
        )

        with pytest.raises(ValidationError) as exc_info:
            LocationDirectory.from_config(config)
        assert exc_info.value.field == "latitude"

    def test_from_config_tags_coordinates(self, directory):
        place = directory.lookup(City.create("London, UK"))

        assert place.location.get_coordinates() == (51.5179, 0.1022)

    def test_from_config_validates_names(self):
        config = DirectoryConfig(places=[{"name": ""}])

        with pytest.raises(ValidationError):
            LocationDirectory.from_config(config)


class TestLookup:
    def test_lookup_known_city(self, directory):
        place = directory.lookup(City.create("Houston, TX"))

        assert place.location == Location.create(29.760427, -95.369803)

    def test_lookup_locationless_city(self, directory):
        place = directory.lookup(City.create("Atlantis"))

        assert place.location is None

    def test_lookup_missing_city(self, directory):
        with pytest.raises(NotFoundError) as exc_info:
            directory.lookup(City.create("Nowhere, XX"))
        assert exc_info.value.city == "Nowhere, XX"

    def test_lookup_missing_logs_error(self, directory, error_messages):
        with pytest.raises(NotFoundError):
            directory.lookup(City.create("Nowhere, XX"))

        assert error_messages == ["City not found in directory: Nowhere, XX"]

    def test_lookup_is_exact(self, directory):
        with pytest.raises(NotFoundError):
            directory.lookup(City.create("houston, tx"))

    def test_first_match_wins(self):
        first = Place(name=City.create("Twin"), location=Location.create(1.0, 1.0))
        second = Place(name=City.create("Twin"), location=Location.create(2.0, 2.0))
        directory = LocationDirectory([first, second])

        assert directory.lookup(City.create("Twin")) is first


class TestLookupPair:
    def test_pair(self, directory, houston, san_mateo):
        assert directory.lookup_pair(houston.name, san_mateo.name) == (houston, san_mateo)

    def test_missing_dest(self, directory):
        with pytest.raises(NotFoundError) as exc_info:
            directory.lookup_pair(City.create("Houston, TX"), City.create("Nowhere, XX"))
        assert exc_info.value.city == "Nowhere, XX"

    def test_both_missing_reports_first(self, directory):
        with pytest.raises(NotFoundError) as exc_info:
            directory.lookup_pair(City.create("Nowhere, XX"), City.create("Elsewhere"))
        assert exc_info.value.city == "Nowhere, XX"
        assert exc_info.value.missing == ("Nowhere, XX", "Elsewhere")

    def test_missing_pair_logs_once(self, directory, error_messages):
        """Test that a failed pair lookup logs a single error naming every missing city."""
        with pytest.raises(NotFoundError):
            directory.lookup_pair(City.create("Nowhere, XX"), City.create("Elsewhere"))

        assert error_messages == ["Cities not found in directory: Nowhere, XX, Elsewhere"]

    def test_found_pair_logs_nothing(self, directory, error_messages):
        directory.lookup_pair(City.create("Camelot"), City.create("Atlantis"))

        assert error_messages == []

    def test_not_found_is_lookup_error(self, directory):
        with pytest.raises(LookupError):
            directory.lookup_pair(City.create("Nowhere, XX"), City.create("Houston, TX"))
