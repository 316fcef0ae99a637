"""
Refresh every location of the weather station at regular intervals.
"""

import threading

import config
from workers.station import RefreshInProgressError
from utils.logging import get_logger

logger = get_logger(__name__)


class RefreshScheduler:
    def __init__(self, station, interval: float = config.REFRESH_INTERVAL):
        self.station = station
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread = None

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="refresh-scheduler", daemon=True)
        self._thread.start()
        logger.info("Refreshing all locations every %s seconds", self.interval)

    def stop(self, timeout=None):
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def tick(self):
        """Refresh all locations once. Returns False if the tick was skipped."""
        try:
            self.station.refresh()
        except RefreshInProgressError:
            logger.info("Refresh already in progress, skipping scheduled refresh")
            return False
        except Exception:
            logger.exception("Scheduled refresh failed")
            return False
        return True

    def _run(self):
        # first refresh happens straight away
        while not self._stop_event.is_set():
            self.tick()
            if self._stop_event.wait(self.interval):
                break
