"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from eventbook.stores.records import TIME_FORMAT


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    venue = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField(format=TIME_FORMAT, allow_null=True)
    organizer = serializers.CharField(allow_null=True)
    capacity = serializers.SerializerMethodField()
    isPast = serializers.BooleanField(source="is_past")

    def get_capacity(self, event) -> int | None:
        return event.capacity.value if event.capacity else None


class ErrorSerializer(serializers.Serializer):
    """Serializer for DomainError responses."""

    code = serializers.CharField(source="code.value")
    message = serializers.CharField()
