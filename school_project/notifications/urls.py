from django.urls import path

from . import views

app_name = "notifications"

urlpatterns = [
    path(
        "audience/activity-groups/<str:activity_group_id>/",
        views.activity_group_recipients,
        name="activity-group-recipients",
    ),
    path(
        "audience/categories/<str:category_id>/",
        views.category_recipients,
        name="category-recipients",
    ),
    path(
        "audience/events/<str:event_id>/activity-groups/<str:activity_group_id>/",
        views.event_group_recipients,
        name="event-group-recipients",
    ),
]
