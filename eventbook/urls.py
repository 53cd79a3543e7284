from django.urls import path

from eventbook.handlers import EventDetailView, EventListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
