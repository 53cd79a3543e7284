"""Eventbook settings, read from ``settings.EVENTBOOK`` with defaults."""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    "STORAGE_KEY": "events",
    "CACHE_ALIAS": "default",
    "REFRESH_INTERVAL_SECONDS": 60,
    "AUTOSTART_REFRESHER": True,
}


def get_setting(name: str) -> Any:
    if name not in DEFAULTS:
        raise KeyError(f"Unknown eventbook setting: {name}")
    return getattr(settings, "EVENTBOOK", {}).get(name, DEFAULTS[name])
