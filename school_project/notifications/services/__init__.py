"""
Notification service layer.

Audience resolution decides WHO receives a notification for an
activity group, a category of groups, or an event participation.
Delivery channels (in-app, email, push) consume the resulting
audience and are not part of this package.
"""

# =====================================================
# AUDIENCE
# =====================================================
from .audience import (
    AudienceResult,
    ByCategorySubtree,
    ByEventParticipation,
    BySingleEntity,
    resolve_audience,
)

# =====================================================
# PUBLIC EXPORTS
# =====================================================
__all__ = [
    "AudienceResult",
    "ByCategorySubtree",
    "ByEventParticipation",
    "BySingleEntity",
    "resolve_audience",
]
