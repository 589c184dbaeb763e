"""
Storage contract consumed by the audience engine.

Lookups return None when the record does not exist. Anything a
repository raises is reported as a RepositoryError.

Two optional hooks matter only for parallel collection:
`supports_threads()` may return False to keep the walk in the
calling thread, and `release_thread()` is called in each worker
when its task ends.
"""

import logging
from typing import Optional, Protocol

from .errors import AudienceError, RepositoryError
from .types import CategoryNode, Entity, EventParticipation

logger = logging.getLogger(__name__)


class AudienceRepository(Protocol):
    def get_category_node(self, category_id: str) -> Optional[CategoryNode]:
        ...

    def get_entity_with_relations(self, entity_id: str) -> Optional[Entity]:
        ...

    def get_event_participation(
        self, event_id: str, entity_id: str
    ) -> Optional[EventParticipation]:
        ...


def call_repository(lookup, *args):
    try:
        return lookup(*args)
    except AudienceError:
        raise
    except Exception as exc:
        logger.exception(
            "Repository lookup %s%r failed",
            getattr(lookup, "__name__", lookup),
            args,
        )
        raise RepositoryError(
            str(exc) or exc.__class__.__name__,
            original=exc,
        ) from exc
