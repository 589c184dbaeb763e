import logging

from django.conf import settings

from .accumulator import accumulate
from .collector import CategoryCollector
from .errors import AudienceError, EntityNotFound, EventNotFound, InvalidRequest
from .expander import expand, expand_participation
from .repository import call_repository
from .types import (
    AudienceResult,
    ByCategorySubtree,
    ByEventParticipation,
    BySingleEntity,
    Cancellation,
)

logger = logging.getLogger(__name__)


def require_id(value, label):
    if value is None or not str(value).strip():
        raise InvalidRequest(f"{label} must be provided.")
    return value


class AudienceResolver:
    """
    Resolves who should be notified for an activity group, a
    category subtree, or a group's participation in an event.
    """

    def __init__(self, repository, *, parallel=False, max_workers=4):
        self.repository = repository
        self.collector = CategoryCollector(
            repository,
            parallel=parallel,
            max_workers=max_workers,
        )

    def resolve(self, request, *, cancel_event=None, timeout=None):
        cancellation = Cancellation.create(
            cancel_event=cancel_event,
            timeout=timeout,
        )
        logger.info("Resolving audience for %r", request)

        try:
            candidates = self._candidates(request, cancellation)
            cancellation.raise_if_cancelled()
            audience = accumulate(candidates)
        except AudienceError as exc:
            logger.warning("Audience resolution failed for %r: %s", request, exc)
            return AudienceResult.failure(exc)

        logger.info(
            "Resolved %d recipients from %d candidates for %r",
            len(audience),
            len(candidates),
            request,
        )
        return AudienceResult.success(audience)

    # --------------------------------------------------
    # DISPATCH
    # --------------------------------------------------
    def _candidates(self, request, cancellation):
        if isinstance(request, BySingleEntity):
            entity_id = require_id(request.entity_id, "ActivityGroupId")
            cancellation.raise_if_cancelled()
            entity = call_repository(
                self.repository.get_entity_with_relations, entity_id
            )
            if entity is None:
                raise EntityNotFound(entity_id)
            return expand([entity], cancellation)

        if isinstance(request, ByCategorySubtree):
            category_id = require_id(request.category_id, "CategoryId")
            entities = self.collector.collect(category_id, cancellation)
            return expand(entities, cancellation)

        if isinstance(request, ByEventParticipation):
            event_id = require_id(request.event_id, "EventId")
            entity_id = require_id(request.entity_id, "ActivityGroupId")
            cancellation.raise_if_cancelled()
            participation = call_repository(
                self.repository.get_event_participation, event_id, entity_id
            )
            if participation is None:
                raise EventNotFound(event_id, entity_id)
            return expand_participation(participation, cancellation)

        raise InvalidRequest(f"Unsupported audience request: {request!r}")


# =====================================================
# DEFAULT ENTRY POINT
# =====================================================

def build_resolver(repository=None, *, parallel=None, max_workers=None):
    """
    Resolver wired from settings. The ORM repository is used
    unless another one is passed in.
    """
    if repository is None:
        from .django_repository import DjangoAudienceRepository
        repository = DjangoAudienceRepository()

    if parallel is None:
        parallel = getattr(settings, "AUDIENCE_PARALLEL_COLLECTION", False)
    if max_workers is None:
        max_workers = getattr(settings, "AUDIENCE_MAX_WORKERS", 4)

    return AudienceResolver(
        repository,
        parallel=parallel,
        max_workers=max_workers,
    )


def resolve_audience(
    request,
    *,
    repository=None,
    parallel=None,
    max_workers=None,
    cancel_event=None,
    timeout=None,
):
    if timeout is None:
        timeout = getattr(settings, "AUDIENCE_TIMEOUT_SECONDS", None)

    resolver = build_resolver(
        repository,
        parallel=parallel,
        max_workers=max_workers,
    )
    return resolver.resolve(
        request,
        cancel_event=cancel_event,
        timeout=timeout,
    )
