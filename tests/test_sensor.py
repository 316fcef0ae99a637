import random
from datetime import datetime, timezone

import pytest

from main.models import COMPASS_POINTS, LOCATIONS
from workers.sensor import generate_mock_reading


class FixedRandom(random.Random):
    """Returns the same value from every random() call."""

    def __init__(self, value):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


@pytest.mark.parametrize("location", LOCATIONS, ids=lambda location: location.id)
def test_reading_fields_in_range(location, rng):
    for _ in range(200):
        reading = generate_mock_reading(location.id, rng=rng)

        assert isinstance(reading.uv_index, int)
        assert 0 <= reading.uv_index <= 10
        assert reading.wind_direction in COMPASS_POINTS
        assert 1000 <= reading.pressure <= 1020
        assert reading.rainfall >= 0


def test_location_factor_biases_readings():
    low = FixedRandom(0.0)
    home = generate_mock_reading("home", rng=low)
    park = generate_mock_reading("neighborhood", rng=low)

    # index 0 vs index 4 -> factor 0 vs 2
    assert home.temperature == 10.0
    assert park.temperature == 12.0
    assert home.humidity == 30.0
    assert park.humidity == 28.0
    assert park.wind_speed == 2.0


def test_every_third_location_gets_rain_bonus():
    low = FixedRandom(0.0)
    assert generate_mock_reading("home", rng=low).rainfall == 2.0
    assert generate_mock_reading("garden", rng=low).rainfall == 0.0
    assert generate_mock_reading("backyard", rng=low).rainfall == 2.0


def test_upper_bounds_of_discrete_fields():
    high = FixedRandom(0.9999)
    reading = generate_mock_reading("garden", rng=high)
    assert reading.uv_index == 10
    assert reading.wind_direction == "NW"


def test_timestamp_defaults_to_now_in_utc():
    before = datetime.now(timezone.utc)
    reading = generate_mock_reading("home")
    assert before <= reading.timestamp <= datetime.now(timezone.utc)


def test_explicit_timestamp():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert generate_mock_reading("home", now=now).timestamp == now


def test_unknown_location_still_generates(caplog):
    reading = generate_mock_reading("attic", rng=FixedRandom(0.0))

    # index -1: factor -0.5, no rain bonus
    assert reading.temperature == 9.5
    assert reading.humidity == 30.5
    assert reading.rainfall == 0.0
    assert "attic" in caplog.text
