"""Input rules for submitted events and the venue/date collision check."""

import datetime as dt
from collections.abc import Mapping
from typing import Any

from django.utils import timezone
from rest_framework import serializers

from eventbook.domain import Capacity, EventDraft, EventId
from eventbook.domain.errors import EventValidationError
from eventbook.services.event_store import Clock, EventStore

COLLISION_MESSAGE = "An event already exists at this venue on the selected date"

OPTIONAL_FIELDS = ("time", "organizer", "capacity")


def _text_field(label: str, min_length: int, max_length: int) -> serializers.CharField:
    return serializers.CharField(
        min_length=min_length,
        max_length=max_length,
        error_messages={
            "required": f"{label} is required",
            "null": f"{label} is required",
            "blank": f"{label} is required",
            "min_length": f"{label} must be at least {min_length} characters",
            "max_length": f"{label} must be less than {max_length} characters",
        },
    )


class EventFormSerializer(serializers.Serializer):
    """Field rules for an event submission.

    Context:
        today: the reference day for the past-date rule.
        has_collision: callable(venue, date) -> bool for the cross-field rule.
    """

    title = _text_field("Title", 3, 100)
    description = _text_field("Description", 10, 500)
    venue = _text_field("Venue", 3, 100)
    date = serializers.DateField(
        error_messages={
            "required": "Date is required",
            "null": "Date is required",
            "invalid": "Enter a valid date",
        },
    )
    time = serializers.TimeField(
        required=False,
        allow_null=True,
        error_messages={"invalid": "Enter a valid time"},
    )
    organizer = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=100,
        error_messages={"max_length": "Organizer must be less than 100 characters"},
    )
    capacity = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=0,
        error_messages={
            "invalid": "Capacity must be a number",
            "min_value": "Capacity cannot be negative",
        },
    )

    def to_internal_value(self, data):
        # Untouched form inputs arrive as "", which means "not given".
        if isinstance(data, Mapping):
            data = {key: value for key, value in data.items() if key in self.fields}
            for key in (*OPTIONAL_FIELDS, "date"):
                if data.get(key) == "":
                    del data[key]
        return super().to_internal_value(data)

    def validate_date(self, value: dt.date) -> dt.date:
        if value < self.context["today"]:
            raise serializers.ValidationError("Event date cannot be in the past")
        return value

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        has_collision = self.context.get("has_collision")
        if has_collision and has_collision(attrs["venue"], attrs["date"]):
            raise serializers.ValidationError(
                {"venue": [COLLISION_MESSAGE], "date": [COLLISION_MESSAGE]}
            )
        return attrs


class EventValidator:
    """Turns raw submissions into EventDrafts or raises EventValidationError."""

    def __init__(self, store: EventStore, clock: Clock = timezone.now) -> None:
        self._store = store
        self._clock = clock

    def has_collision(
        self, venue: str, event_date: dt.date, exclude_id: EventId | None = None
    ) -> bool:
        """Return True if another event already holds ``venue`` on ``event_date``."""
        venue = venue.strip()
        return any(
            event.venue == venue and event.date == event_date and event.id != exclude_id
            for event in self._store.list()
        )

    def validate(self, data: Mapping[str, Any], exclude_id: EventId | None = None) -> EventDraft:
        """Check field rules, then the collision rule.

        Raises:
            EventValidationError: With field-scoped messages on any failure.
        """
        serializer = EventFormSerializer(
            data=data,
            context={
                "today": timezone.localdate(self._clock()),
                "has_collision": lambda venue, day: self.has_collision(venue, day, exclude_id),
            },
        )
        if not serializer.is_valid():
            raise EventValidationError(
                {field: [str(message) for message in messages] for field, messages in serializer.errors.items()}
            )

        attrs = serializer.validated_data
        capacity = attrs.get("capacity")
        return EventDraft(
            title=attrs["title"],
            description=attrs["description"],
            venue=attrs["venue"],
            date=attrs["date"],
            time=attrs.get("time"),
            organizer=attrs.get("organizer") or None,
            capacity=Capacity(capacity) if capacity is not None else None,
        )
