"""
tests/test_accumulator.py - recipient deduplication.
"""

from audience_fakes import person
from notifications.services.audience import RecipientAudience, accumulate


class TestFirstWriteWins:

    def test_first_record_kept_whole(self):
        first = person("p1", emails=["first@example.com"], notifications=False, emails_ok=False)
        later = person("p1", emails=["later@example.com"], notifications=True, emails_ok=True)

        audience = accumulate([first, later])

        assert len(audience) == 1
        assert audience.get("p1") == first
        assert audience.get("p1").email_addresses == ("first@example.com",)

    def test_ids_unique_and_in_first_seen_order(self):
        candidates = [person(pid) for pid in ["a", "b", "a", "c", "b", "a"]]

        audience = accumulate(candidates)

        assert audience.ids == ["a", "b", "c"]

    def test_accumulates_into_existing_audience(self):
        audience = accumulate([person("a")])

        accumulate([person("a"), person("b")], audience)

        assert audience.ids == ["a", "b"]

    def test_empty_candidates(self):
        assert len(accumulate([])) == 0


class TestRecipientAudience:

    def test_add_reports_insertion(self):
        audience = RecipientAudience()

        assert audience.add(person("a")) is True
        assert audience.add(person("a")) is False
        assert "a" in audience
        assert "z" not in audience

    def test_as_list_serializes_recipients(self):
        audience = accumulate([person("a", first="Ann", last="Lee", emails=["ann@example.com"])])

        assert audience.as_list() == [{
            "id": "a",
            "first_name": "Ann",
            "last_name": "Lee",
            "email_addresses": ["ann@example.com"],
            "receive_notifications": True,
            "receive_emails": True,
        }]
