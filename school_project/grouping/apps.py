from django.apps import AppConfig


class GroupingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "grouping"
