from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
import logging

logger = logging.getLogger(__name__)


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "notifications"

    def ready(self):
        # --------------------------------------------------
        # Validate audience settings early
        # --------------------------------------------------
        max_workers = getattr(settings, "AUDIENCE_MAX_WORKERS", 4)
        if not isinstance(max_workers, int) or max_workers < 1:
            raise ImproperlyConfigured(
                "AUDIENCE_MAX_WORKERS must be a positive integer."
            )

        timeout = getattr(settings, "AUDIENCE_TIMEOUT_SECONDS", None)
        if timeout is not None and timeout <= 0:
            raise ImproperlyConfigured(
                "AUDIENCE_TIMEOUT_SECONDS must be positive or None."
            )

        logger.debug(
            "Audience resolution: parallel=%s, max_workers=%s, timeout=%s",
            getattr(settings, "AUDIENCE_PARALLEL_COLLECTION", False),
            max_workers,
            timeout,
        )
