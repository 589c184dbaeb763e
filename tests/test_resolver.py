"""
tests/test_resolver.py - audience resolution end to end over an
in-memory repository.
"""

import threading

import pytest

from audience_fakes import (
    InMemoryRepository,
    branch,
    group,
    leaf,
    member,
    participation,
    person,
)
from notifications.services.audience import (
    AudienceResolver,
    ByCategorySubtree,
    ByEventParticipation,
    BySingleEntity,
    Cancelled,
    CategoryNotFound,
    EntityNotFound,
    EventNotFound,
    InvalidRequest,
    RepositoryError,
    build_resolver,
    resolve_audience,
)


def resolve(repo, request, **options):
    return AudienceResolver(repo).resolve(request, **options)


class TestCategorySubtree:

    def test_sports_example(self, sports_repository):
        result = resolve(sports_repository, ByCategorySubtree("sports"))

        assert result.succeeded
        assert result.audience.ids == [
            "learner-1",
            "parent-1",
            "learner-2",
            "coach-1",
            "learner-3",
            "coach-2",
        ]

    def test_never_returns_duplicate_ids(self, sports_repository):
        audience = resolve(sports_repository, ByCategorySubtree("sports")).unwrap()

        assert len(audience.ids) == len(set(audience.ids))

    def test_guardian_seen_first_wins_over_staff(self):
        shared = person("p-shared", notifications=False, emails_ok=False)
        repo = InMemoryRepository(categories=[
            branch("root", "first", "second"),
            leaf("first", group("g1", members=[member(person("l1"), shared)])),
            leaf("second", group("g2", staff=[shared])),
        ])

        audience = resolve(repo, ByCategorySubtree("root")).unwrap()

        kept = audience.get("p-shared")
        assert kept.receive_notifications is False
        assert kept.receive_emails is False

    def test_staff_seen_first_wins_over_guardian(self):
        shared = person("p-shared", notifications=False, emails_ok=True)
        repo = InMemoryRepository(categories=[
            branch("root", "first", "second"),
            leaf("first", group("g2", staff=[shared])),
            leaf("second", group("g1", members=[member(person("l1"), shared)])),
        ])

        kept = resolve(repo, ByCategorySubtree("root")).unwrap().get("p-shared")

        assert kept.receive_notifications is True
        assert kept.receive_emails is False

    def test_missing_category(self):
        result = resolve(InMemoryRepository(), ByCategorySubtree("ghost"))

        assert not result.succeeded
        assert isinstance(result.error, CategoryNotFound)
        assert result.audience is None
        assert result.messages == ["Category 'ghost' not found."]

    def test_repository_error_carries_message(self, sports_repository):
        sports_repository.failing.add("swimming")

        result = resolve(sports_repository, ByCategorySubtree("sports"))

        assert isinstance(result.error, RepositoryError)
        assert "database unavailable while reading swimming" in result.messages[0]


class TestSingleEntity:

    def test_expands_one_group(self, sports_repository):
        audience = resolve(sports_repository, BySingleEntity("group-b")).unwrap()

        assert audience.ids == ["learner-3", "parent-1", "learner-1", "coach-2"]
        assert audience.get("coach-2").receive_emails is False

    def test_missing_group(self, sports_repository):
        result = resolve(sports_repository, BySingleEntity("nope"))

        assert isinstance(result.error, EntityNotFound)
        with pytest.raises(EntityNotFound):
            result.unwrap()


class TestEventParticipation:

    def test_restricted_to_participants(self):
        grp = group(
            "g1",
            members=[member(person("l1"), person("p1")), member(person("l2"), person("p2"))],
            staff=[person("t1")],
        )
        repo = InMemoryRepository(
            entities=[grp],
            participations=[participation("event-1", grp, "l2")],
        )

        audience = resolve(repo, ByEventParticipation("event-1", "g1")).unwrap()

        assert audience.ids == ["l2", "p2", "t1"]

    def test_missing_participation(self, sports_repository):
        result = resolve(sports_repository, ByEventParticipation("event-x", "group-a"))

        assert isinstance(result.error, EventNotFound)
        assert result.error.event_id == "event-x"


class TestGuards:

    @pytest.mark.parametrize("request_", [
        BySingleEntity(""),
        ByCategorySubtree("  "),
        ByEventParticipation("", "group-a"),
        ByEventParticipation("event-1", None),
    ])
    def test_blank_ids_rejected(self, sports_repository, request_):
        result = resolve(sports_repository, request_)

        assert isinstance(result.error, InvalidRequest)
        assert sports_repository.category_calls == []

    def test_unsupported_request(self, sports_repository):
        result = resolve(sports_repository, "sports")

        assert isinstance(result.error, InvalidRequest)


class TestCancellation:

    def test_cancel_event_gives_no_partial_audience(self, sports_repository):
        event = threading.Event()
        event.set()

        result = resolve(sports_repository, ByCategorySubtree("sports"), cancel_event=event)

        assert isinstance(result.error, Cancelled)
        assert result.audience is None

    def test_expired_timeout(self, sports_repository):
        result = resolve(sports_repository, BySingleEntity("group-a"), timeout=0)

        assert isinstance(result.error, Cancelled)
        assert "timed out" in result.messages[0]


class TestSettingsWiring:

    def test_build_resolver_reads_settings(self, settings, sports_repository):
        settings.AUDIENCE_PARALLEL_COLLECTION = True
        settings.AUDIENCE_MAX_WORKERS = 3

        resolver = build_resolver(sports_repository)

        assert resolver.collector.parallel is True
        assert resolver.collector.max_workers == 3

    def test_resolve_audience_parallel(self, settings, sports_repository):
        settings.AUDIENCE_PARALLEL_COLLECTION = True

        result = resolve_audience(ByCategorySubtree("sports"), repository=sports_repository)

        assert result.audience.ids == [
            "learner-1",
            "parent-1",
            "learner-2",
            "coach-1",
            "learner-3",
            "coach-2",
        ]

    def test_resolve_audience_uses_configured_timeout(self, settings, sports_repository):
        settings.AUDIENCE_TIMEOUT_SECONDS = 0

        result = resolve_audience(BySingleEntity("group-a"), repository=sports_repository)

        assert isinstance(result.error, Cancelled)
