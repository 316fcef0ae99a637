"""
Generate simulated Temperature/Humidity/Pressure/Wind/Rain/UV readings
for the locations of the station registry.
"""

import random
from datetime import datetime, timezone

from main.models import COMPASS_POINTS, Reading, location_index
from utils.logging import get_logger

logger = get_logger(__name__)

# GENERATOR RANGES
# (width of the uniform range, base offset)
TEMPERATURE_RANGE = (15, 10)
HUMIDITY_RANGE = (40, 30)
PRESSURE_RANGE = (20, 1000)
WIND_SPEED_RANGE = (15, 0)
RAINFALL_RANGE = (10, 0)
MAX_UV_INDEX = 10

# bias added to a few fields per registry position
LOCATION_FACTOR = 0.5
# every third location gets this much extra rain
RAINY_LOCATION_BONUS = 2


def _uniform(rng, value_range, offset=0.0):
    width, base = value_range
    return round(rng.random() * width + base + offset, 1)


def location_factor(index):
    return index * LOCATION_FACTOR


def generate_mock_reading(location_id, rng=None, now=None):
    """Synthesize a reading for ``location_id``.

    Each field is drawn independently; the location's position in the
    registry shifts temperature, humidity and wind speed so the sites
    don't all look alike. An id outside the registry is still accepted and
    generated with index -1.
    """
    rng = rng or random
    index = location_index(location_id)
    if index < 0:
        logger.warning("Generating reading for unregistered location %r", location_id)

    factor = location_factor(index)
    rain_bonus = RAINY_LOCATION_BONUS if index >= 0 and index % 3 == 0 else 0

    return Reading(
        temperature=_uniform(rng, TEMPERATURE_RANGE, factor),
        humidity=_uniform(rng, HUMIDITY_RANGE, -factor),
        pressure=_uniform(rng, PRESSURE_RANGE),
        wind_speed=_uniform(rng, WIND_SPEED_RANGE, factor),
        wind_direction=COMPASS_POINTS[int(rng.random() * len(COMPASS_POINTS))],
        rainfall=_uniform(rng, RAINFALL_RANGE, rain_bonus),
        uv_index=int(rng.random() * (MAX_UV_INDEX + 1)),
        timestamp=now or datetime.now(timezone.utc),
    )
