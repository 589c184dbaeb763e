import logging

from schools.models import ActivityGroup, ParticipatingActivityGroup

from notifications.services.audience import (
    CategoryCollector,
    CategoryNotFound,
    merge_entities,
)
from notifications.services.audience.django_repository import DjangoAudienceRepository

logger = logging.getLogger(__name__)


def parse_category_ids(raw):
    """
    "a, b,,c" -> ["a", "b", "c"]
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def activity_groups_for_categories(category_ids, *, repository=None):
    """
    Activity groups filed anywhere beneath any of the given
    categories, each once, in first-seen order.

    Unknown category ids are skipped.
    """
    collector = CategoryCollector(repository or DjangoAudienceRepository())

    partials = []
    for category_id in category_ids:
        try:
            partials.append(collector.collect(category_id))
        except CategoryNotFound as exc:
            logger.warning("Skipping category filter: %s", exc)

    entities = merge_entities(*partials)
    # Callers want model instances; one extra query for the whole list
    groups = ActivityGroup.objects.in_bulk([entity.id for entity in entities])

    return [groups[entity.id] for entity in entities if entity.id in groups]


def event_activity_groups(event_id):
    """
    Activity groups taking part in an event, ordered by name.
    """
    participations = (
        ParticipatingActivityGroup.objects
        .filter(event_id=event_id, activity_group__is_deleted=False)
        .select_related("activity_group")
        .order_by("activity_group__name", "activity_group_id")
    )
    return [p.activity_group for p in participations]
