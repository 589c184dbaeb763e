"""
tests/test_activity_groups.py - category and event filtered listings.
"""

import pytest

from audience_fakes import InMemoryRepository, branch, group, leaf
from schools.models import ActivityGroup, ParticipatingActivityGroup
from schools.services import (
    activity_groups_for_categories,
    event_activity_groups,
    parse_category_ids,
)


class TestParseCategoryIds:

    @pytest.mark.parametrize("raw, expected", [
        (None, []),
        ("", []),
        ("a", ["a"]),
        ("a, b,,c ", ["a", "b", "c"]),
    ])
    def test_parse(self, raw, expected):
        assert parse_category_ids(raw) == expected


class TestActivityGroupsForCategories:

    def test_union_in_first_seen_order(self, school_data):
        groups = activity_groups_for_categories(["swimming", "soccer"])

        assert [g.id for g in groups] == ["group-a", "group-b"]
        assert all(isinstance(g, ActivityGroup) for g in groups)

    def test_unknown_category_skipped(self, school_data):
        groups = activity_groups_for_categories(["ghost", "soccer"])

        assert [g.id for g in groups] == ["group-a"]

    def test_custom_repository(self, school_data):
        repo = InMemoryRepository(categories=[
            branch("root", "only"),
            leaf("only", group("group-b")),
        ])

        groups = activity_groups_for_categories(["root"], repository=repo)

        assert [g.id for g in groups] == ["group-b"]


class TestEventActivityGroups:

    def test_ordered_by_name(self, school_data):
        swim_team = school_data["groups"][1]
        ParticipatingActivityGroup.objects.create(
            event=school_data["event"], activity_group=swim_team
        )

        groups = event_activity_groups("event-1")

        assert [g.name for g in groups] == ["Soccer U12", "Swim Squad"]

    def test_soft_deleted_groups_hidden(self, school_data):
        old_team = school_data["groups"][2]
        ParticipatingActivityGroup.objects.create(
            event=school_data["event"], activity_group=old_team
        )

        assert [g.id for g in event_activity_groups("event-1")] == ["group-a"]

    def test_unknown_event(self, school_data):
        assert event_activity_groups("missing") == []
