"""Integration tests for the event HTTP handlers.

Run with: pytest tests/test_handlers.py -v
"""

import pytest
from django.apps import apps
from rest_framework.test import APIClient, APIRequestFactory

from eventbook.domain.errors import PersistenceWriteError
from eventbook.handlers import EventDetailView, EventListView
from eventbook.services.validator import COLLISION_MESSAGE


@pytest.fixture
def list_view(service):
    return EventListView.as_view(service=service)


@pytest.fixture
def detail_view(service):
    return EventDetailView.as_view(service=service)


class TestEventList:
    """Tests for GET/POST /api/events"""

    def test_list_events_empty_catalog(self, api_factory: APIRequestFactory, list_view):
        response = list_view(api_factory.get("/api/events"))
        assert response.status_code == 200
        assert response.data == []

    def test_create_event_returns_event(self, api_factory, list_view, launch_data):
        response = list_view(api_factory.post("/api/events", launch_data, format="json"))
        assert response.status_code == 201
        body = response.data
        assert body["title"] == "Launch"
        assert body["date"] == "2099-01-01"
        assert body["isPast"] is False
        assert body["time"] is None
        assert body["capacity"] is None
        assert body["id"]

    def test_list_preserves_insertion_order(self, api_factory, list_view, launch_data):
        for venue in ("Main Hall", "Annex", "Rooftop"):
            list_view(api_factory.post("/api/events", {**launch_data, "venue": venue}, format="json"))
        response = list_view(api_factory.get("/api/events"))
        assert [event["venue"] for event in response.data] == ["Main Hall", "Annex", "Rooftop"]

    def test_create_collision_returns_field_errors(self, api_factory, list_view, launch_data):
        list_view(api_factory.post("/api/events", launch_data, format="json"))
        response = list_view(api_factory.post("/api/events", launch_data, format="json"))
        assert response.status_code == 400
        assert response.data["code"] == "VALIDATION_FAILED"
        assert response.data["errors"] == {
            "venue": [COLLISION_MESSAGE],
            "date": [COLLISION_MESSAGE],
        }

    def test_create_write_failure_returns_503(self, api_factory, list_view, slot, launch_data, monkeypatch):
        def failing_write(events):
            raise PersistenceWriteError("disk full")

        monkeypatch.setattr(slot, "write", failing_write)
        response = list_view(api_factory.post("/api/events", launch_data, format="json"))
        assert response.status_code == 503
        assert response.data == {"code": "PERSISTENCE_WRITE_FAILED", "message": "Events could not be saved"}


class TestEventDetail:
    """Tests for GET/PUT/DELETE /api/events/{id}"""

    def test_get_event_returns_details(self, api_factory, detail_view, service, launch_data):
        event = service.create_event({**launch_data, "time": "09:15", "capacity": 30})
        response = detail_view(api_factory.get(f"/api/events/{event.id}"), event_id=event.id.value)
        assert response.status_code == 200
        assert response.data["time"] == "09:15"
        assert response.data["capacity"] == 30

    def test_get_event_not_found(self, api_factory, detail_view):
        response = detail_view(api_factory.get("/api/events/missing"), event_id="missing")
        assert response.status_code == 404
        assert response.data == {"code": "EVENT_NOT_FOUND", "message": "Event not found"}

    def test_update_event(self, api_factory, detail_view, service, launch_data):
        event = service.create_event(launch_data)
        request = api_factory.put(
            f"/api/events/{event.id}", {**launch_data, "title": "Relaunch"}, format="json"
        )
        response = detail_view(request, event_id=event.id.value)
        assert response.status_code == 200
        assert response.data["id"] == event.id.value
        assert response.data["title"] == "Relaunch"

    def test_update_invalid_data(self, api_factory, detail_view, service, launch_data):
        event = service.create_event(launch_data)
        request = api_factory.put(
            f"/api/events/{event.id}", {**launch_data, "description": "short"}, format="json"
        )
        response = detail_view(request, event_id=event.id.value)
        assert response.status_code == 400
        assert response.data["errors"] == {
            "description": ["Description must be at least 10 characters"],
        }

    def test_update_missing_event(self, api_factory, detail_view, launch_data):
        request = api_factory.put("/api/events/missing", launch_data, format="json")
        response = detail_view(request, event_id="missing")
        assert response.status_code == 404

    def test_delete_event(self, api_factory, detail_view, service, launch_data):
        event = service.create_event(launch_data)
        response = detail_view(api_factory.delete(f"/api/events/{event.id}"), event_id=event.id.value)
        assert response.status_code == 204
        assert service.list_events() == []

    def test_delete_missing_event(self, api_factory, detail_view):
        response = detail_view(api_factory.delete("/api/events/missing"), event_id="missing")
        assert response.status_code == 404


class TestRouting:
    """Requests through the URL conf use the app's own service."""

    @pytest.fixture(autouse=True)
    def fresh_service(self):
        config = apps.get_app_config("eventbook")
        config.reset_service()
        yield
        config.reset_service()

    def test_create_and_fetch_through_urls(self, api_client: APIClient, launch_data):
        created = api_client.post("/api/events", launch_data, format="json")
        assert created.status_code == 201

        fetched = api_client.get(f"/api/events/{created.json()['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["venue"] == "Main Hall"

    def test_app_service_is_not_auto_started_in_tests(self):
        service = apps.get_app_config("eventbook").get_service()
        assert not service.store.running


class TestServiceLifecycle:
    def test_reset_unregisters_exit_hook(self, settings, monkeypatch):
        config = apps.get_app_config("eventbook")
        config.reset_service()
        registered, unregistered = [], []
        monkeypatch.setattr("eventbook.apps.atexit.register", registered.append)
        monkeypatch.setattr("eventbook.apps.atexit.unregister", unregistered.append)
        settings.EVENTBOOK = {"AUTOSTART_REFRESHER": True, "REFRESH_INTERVAL_SECONDS": 3600}

        service = config.get_service()
        assert service.store.running
        config.reset_service()

        assert not service.store.running
        assert registered == [service.store.stop]
        assert unregistered == [service.store.stop]
