"""
School service layer.

Read-side helpers for activity groups; audience resolution
lives in notifications.services.audience.
"""

from .activity_groups import (
    activity_groups_for_categories,
    event_activity_groups,
    parse_category_ids,
)

__all__ = [
    "activity_groups_for_categories",
    "event_activity_groups",
    "parse_category_ids",
]
