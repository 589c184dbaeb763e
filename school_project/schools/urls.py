from django.urls import path

from . import views

app_name = "schools"

urlpatterns = [
    path(
        "activity-groups/",
        views.activity_groups_by_categories,
        name="activity-groups-by-categories",
    ),
    path(
        "events/<str:event_id>/activity-groups/",
        views.activity_groups_by_event,
        name="activity-groups-by-event",
    ),
]
