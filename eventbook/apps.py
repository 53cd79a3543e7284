import atexit
import logging
from threading import Lock

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class EventbookConfig(AppConfig):
    name = "eventbook"
    verbose_name = "Eventbook"

    def __init__(self, app_name, app_module) -> None:
        super().__init__(app_name, app_module)
        self._service = None
        self._service_lock = Lock()

    def get_service(self):
        """Return the process-wide EventService, building and loading it on first use."""
        from eventbook.conf import get_setting
        from eventbook.services import EventService, EventStore
        from eventbook.stores import CacheEventSlot

        with self._service_lock:
            if self._service is None:
                slot = CacheEventSlot(
                    key=get_setting("STORAGE_KEY"),
                    alias=get_setting("CACHE_ALIAS"),
                )
                store = EventStore(
                    slot,
                    refresh_interval=get_setting("REFRESH_INTERVAL_SECONDS"),
                )
                store.load()
                if get_setting("AUTOSTART_REFRESHER"):
                    store.start()
                    atexit.register(store.stop)
                self._service = EventService(store)
                logger.info("Event service ready")
            return self._service

    def reset_service(self) -> None:
        """Stop and drop the current service; the next get_service() builds a fresh one."""
        with self._service_lock:
            if self._service is not None:
                self._service.store.stop()
                atexit.unregister(self._service.store.stop)
                self._service = None
