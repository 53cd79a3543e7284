"""Repeating background task that keeps past-event flags fresh."""

import logging
from collections.abc import Callable
from threading import Event, Thread

logger = logging.getLogger(__name__)


class PastFlagRefresher:
    """Calls ``refresh`` every ``interval`` seconds on a daemon thread until stopped."""

    def __init__(self, refresh: Callable[[], object], interval: float = 60.0) -> None:
        if interval <= 0:
            raise ValueError("Refresh interval must be positive")
        self._refresh = refresh
        self.interval = interval
        self._stop_event = Event()
        self._thread: Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self, stop_event: Event) -> None:
        logger.info(f"Past-flag refresher started (every {self.interval}s)")
        while not stop_event.wait(self.interval):
            try:
                self._refresh()
            except Exception as e:
                logger.error(f"Error while refreshing past flags: {e}", exc_info=True)
        logger.info("Past-flag refresher stopped")

    def start(self) -> None:
        if self.running:
            logger.warning("Past-flag refresher is already running")
            return

        # One stop flag per run.
        self._stop_event = Event()
        self._thread = Thread(
            target=self._run,
            args=(self._stop_event,),
            name="eventbook-past-flags",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        if self._thread is None:
            return

        self._stop_event.set()
        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            logger.warning("Past-flag refresher did not stop within timeout")
            return
        self._thread = None
