"""
Audience resolution engine.

Decides WHO should be notified for an activity group, a category
subtree, or an event participation. Delivery is not handled here.
"""

from .accumulator import accumulate
from .collector import CategoryCollector, merge_entities
from .errors import (
    AudienceError,
    CategoryNotFound,
    Cancelled,
    EntityNotFound,
    EventNotFound,
    InvalidRequest,
    RepositoryError,
)
from .expander import expand, expand_entity, expand_participation
from .repository import AudienceRepository
from .resolver import AudienceResolver, build_resolver, resolve_audience
from .types import (
    AudienceRequest,
    AudienceResult,
    ByCategorySubtree,
    ByEventParticipation,
    BySingleEntity,
    Cancellation,
    CategoryNode,
    Entity,
    EventParticipation,
    GuardianLink,
    Member,
    Person,
    RecipientAudience,
)

__all__ = [
    # Facade
    "AudienceResolver",
    "build_resolver",
    "resolve_audience",

    # Stages
    "CategoryCollector",
    "merge_entities",
    "expand",
    "expand_entity",
    "expand_participation",
    "accumulate",

    # Contract
    "AudienceRepository",

    # Types
    "AudienceRequest",
    "AudienceResult",
    "ByCategorySubtree",
    "ByEventParticipation",
    "BySingleEntity",
    "Cancellation",
    "CategoryNode",
    "Entity",
    "EventParticipation",
    "GuardianLink",
    "Member",
    "Person",
    "RecipientAudience",

    # Errors
    "AudienceError",
    "CategoryNotFound",
    "Cancelled",
    "EntityNotFound",
    "EventNotFound",
    "InvalidRequest",
    "RepositoryError",
]
