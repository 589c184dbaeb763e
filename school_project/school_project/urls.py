from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    # DJANGO ADMIN (STAFF ONLY)
    path("schools/django/admin/", admin.site.urls),

    # JSON APIS
    path("api/notifications/", include("notifications.urls")),
    path("api/schools/", include("schools.urls")),
]
