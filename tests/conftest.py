import random

import pytest

from app import create_app
from workers.station import WeatherStation


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def station():
    """Station without the simulated network delay."""
    return WeatherStation(delay=0)


@pytest.fixture
def app(station):
    app = create_app(station)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
