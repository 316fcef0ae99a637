from dataclasses import dataclass
from datetime import datetime

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


class UnknownLocationError(KeyError):
    """Raised when a location id is not part of the station registry."""

    def __init__(self, location_id):
        super().__init__(location_id)
        self.location_id = location_id

    def __str__(self):
        return f"Unknown location: {self.location_id!r}"


@dataclass(frozen=True)
class Location:
    id: str
    name: str
    latitude: float
    longitude: float

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class Reading:
    temperature: float
    humidity: float
    pressure: float
    wind_speed: float
    wind_direction: str
    rainfall: float
    uv_index: int
    timestamp: datetime

    def to_dict(self):
        return {
            "timestamp": self.timestamp.isoformat(),
            "temperature": self.temperature,
            "humidity": self.humidity,
            "pressure": self.pressure,
            "wind_speed": self.wind_speed,
            "wind_direction": self.wind_direction,
            "rainfall": self.rainfall,
            "uv_index": self.uv_index,
        }

    def __str__(self):
        return f"{self.timestamp.isoformat()}: {self.temperature}°C, {self.humidity}%"


LOCATIONS = (
    Location("home", "Home Station", 40.7128, -74.0060),
    Location("garden", "Garden", 40.7135, -74.0046),
    Location("rooftop", "Rooftop", 40.7120, -74.0052),
    Location("backyard", "Backyard", 40.7125, -74.0065),
    Location("neighborhood", "Neighborhood Park", 40.7140, -74.0070),
)

_LOCATIONS_BY_ID = {location.id: location for location in LOCATIONS}


def is_known_location(location_id):
    return location_id in _LOCATIONS_BY_ID


def get_location(location_id):
    try:
        return _LOCATIONS_BY_ID[location_id]
    except KeyError:
        raise UnknownLocationError(location_id) from None


def location_index(location_id):
    """Position of the location in the registry, or -1 if it isn't registered."""
    for i, location in enumerate(LOCATIONS):
        if location.id == location_id:
            return i
    return -1
