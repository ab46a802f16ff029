"""
Unit tests for the City value object.

Tests cover:
- Validated creation
- Rejection of missing and empty names
- Immutability
- Equality by value
"""
import pytest
from pydantic import ValidationError as PydanticValidationError

from citydistance.domain.exceptions import ValidationError
from citydistance.domain.value_objects import City


class TestCityCreation:
    """Test City.create validation."""

    def test_create_keeps_name(self):
        """Test that a valid name round-trips unchanged."""
        city = City.create("Houston, TX")

        assert city.name == "Houston, TX"
        assert str(city) == "Houston, TX"

    def test_create_with_empty_name_fails(self):
        """Test that an empty name raises ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            City.create("")
        assert exc_info.value.field == "name"

    def test_create_with_none_fails(self):
        """Test that a missing name raises ValidationError."""
        with pytest.raises(ValidationError):
            City.create(None)

    def test_create_does_not_trim(self):
        """Test that whitespace-only names are kept verbatim."""
        city = City.create("  ")

        assert city.name == "  "

    def test_validation_error_is_value_error(self):
        """Test that the domain ValidationError is also a ValueError."""
        with pytest.raises(ValueError):
            City.create("")

    def test_direct_construction_validates(self):
        """Test that bypassing the factory still enforces the invariant."""
        with pytest.raises(PydanticValidationError):
            City(name="")


class TestCityValueSemantics:
    """Test immutability and equality."""

    def test_equal_by_name(self):
        assert City.create("Paris, FR") == City.create("Paris, FR")
        assert City.create("Paris, FR") != City.create("London, UK")

    def test_hashable(self):
        assert len({City.create("Camelot"), City.create("Camelot")}) == 1

    def test_immutable(self):
        city = City.create("Camelot")
        with pytest.raises(PydanticValidationError):
            city.name = "Atlantis"
