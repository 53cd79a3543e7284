"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from eventbook.domain.errors import (
    DomainError,
    EventNotFoundError,
    EventValidationError,
    PersistenceWriteError,
)
from eventbook.handlers.serializers import ErrorSerializer, EventSerializer
from eventbook.services import EventService

logger = logging.getLogger(__name__)


class EventServiceView(APIView):
    """Base view holding the injected EventService."""

    service: EventService | None = None

    def get_service(self) -> EventService:
        if self.service is not None:
            return self.service
        return apps.get_app_config("eventbook").get_service()

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            return self.error_response(exc)
        return super().handle_exception(exc)

    def error_response(self, error: DomainError) -> Response:
        body = ErrorSerializer(error).data
        if isinstance(error, EventValidationError):
            body["errors"] = error.errors
            return Response(body, status=status.HTTP_400_BAD_REQUEST)
        if isinstance(error, EventNotFoundError):
            return Response(body, status=status.HTTP_404_NOT_FOUND)
        if isinstance(error, PersistenceWriteError):
            logger.error(f"Event write failed: {error.reason}")
            return Response(body, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        logger.error(f"Unmapped domain error: {error}")
        return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class EventListView(EventServiceView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = self.get_service().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        event = self.get_service().create_event(request.data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(EventServiceView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.get_service().get_event(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        event = self.get_service().update_event(event_id, request.data)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        self.get_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
