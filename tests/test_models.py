from datetime import datetime, timezone

import pytest

from main.models import (
    LOCATIONS,
    Reading,
    UnknownLocationError,
    get_location,
    is_known_location,
    location_index,
)


def test_registry_has_five_unique_locations():
    ids = [location.id for location in LOCATIONS]
    assert ids == ["home", "garden", "rooftop", "backyard", "neighborhood"]
    assert len(set(ids)) == len(ids)


def test_get_location():
    garden = get_location("garden")
    assert garden.name == "Garden"
    assert (garden.latitude, garden.longitude) == (40.7135, -74.0046)


def test_get_unknown_location_raises():
    with pytest.raises(UnknownLocationError) as excinfo:
        get_location("attic")
    assert excinfo.value.location_id == "attic"
    assert "attic" in str(excinfo.value)


def test_location_index():
    assert location_index("home") == 0
    assert location_index("neighborhood") == 4
    assert location_index("attic") == -1
    assert is_known_location("rooftop")
    assert not is_known_location("attic")


def test_reading_to_dict():
    timestamp = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    reading = Reading(20.5, 55.0, 1010.2, 4.1, "NE", 0.0, 3, timestamp)

    data = reading.to_dict()
    assert data["timestamp"] == "2024-05-01T12:30:00+00:00"
    assert data["wind_direction"] == "NE"
    assert data["uv_index"] == 3
