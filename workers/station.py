"""
In-memory state of the weather station: the latest reading and a bounded
history per location, refreshed from the mock sensor generator.
"""

import threading
import time
from collections import deque
from datetime import datetime, timezone

import config
from main.models import LOCATIONS, get_location
from workers.sensor import generate_mock_reading
from utils.logging import get_logger

logger = get_logger(__name__)


class RefreshInProgressError(RuntimeError):
    """Raised when a refresh is requested while another one is still running."""


class WeatherStation:
    """Holds the current-reading and history tables for every location."""

    def __init__(
        self,
        history_size: int = config.HISTORY_SIZE,
        delay: float = config.SIMULATED_DELAY,
        generator=generate_mock_reading,
    ):
        self.history_size = history_size
        self.delay = delay
        self.generator = generator

        self.loading = False
        self.last_refresh = None

        self._current = {}
        self._history = {}
        # guards table access
        self._lock = threading.Lock()
        # held for the whole duration of a refresh
        self._refresh_guard = threading.Lock()

    # TABLES

    def current(self, location_id):
        get_location(location_id)
        with self._lock:
            return self._current.get(location_id)

    def history(self, location_id):
        """Readings for the location, oldest first."""
        get_location(location_id)
        with self._lock:
            return list(self._history.get(location_id, ()))

    def has_data(self, location_id):
        with self._lock:
            return location_id in self._current

    def snapshot(self):
        with self._lock:
            return {
                "current": dict(self._current),
                "history": {key: list(value) for key, value in self._history.items()},
            }

    # REFRESH

    def refresh(self, location_id=None):
        """Regenerate one location, or every location in registry order.

        Returns the new readings keyed by location id. Raises
        RefreshInProgressError if another refresh hasn't finished yet.
        """
        targets = self._targets(location_id)

        if not self._refresh_guard.acquire(blocking=False):
            raise RefreshInProgressError("A refresh is already in progress")
        try:
            return self._refresh_locked(targets)
        finally:
            self._refresh_guard.release()

    def select(self, location_id):
        """Return the current reading, generating one if the location has none yet.

        Waits for an in-flight refresh rather than failing, since that refresh
        may already be filling in the location.
        """
        location = get_location(location_id)
        if self.has_data(location.id):
            return self.current(location.id)

        with self._refresh_guard:
            # the refresh we waited on may have filled it in
            if not self.has_data(location.id):
                logger.info("No data for %s yet, fetching", location.id)
                self._refresh_locked([location])
        return self.current(location.id)

    def _targets(self, location_id):
        if location_id is None:
            return list(LOCATIONS)
        return [get_location(location_id)]

    def _refresh_locked(self, targets):
        self.loading = True
        try:
            # simulated network latency
            if self.delay > 0:
                time.sleep(self.delay)

            readings = {}
            for location in targets:
                readings[location.id] = self.generator(location.id)

            with self._lock:
                for location_id, reading in readings.items():
                    logger.debug("%s: %s", location_id, reading)
                    self._current[location_id] = reading
                    history = self._history.get(location_id)
                    if history is None:
                        history = self._history[location_id] = deque(maxlen=self.history_size)
                    history.append(reading)
                self.last_refresh = datetime.now(timezone.utc)
        finally:
            self.loading = False

        logger.info("Refreshed %s", ", ".join(readings))
        return readings
