"""
Value types consumed and produced by the audience engine.

These are plain frozen dataclasses so the engine never touches
the ORM. The Django repository maps models onto them.
"""

import threading
import time
from dataclasses import asdict, dataclass, field
from typing import Iterator, Optional

from .errors import Cancelled


# =====================================================
# PEOPLE
# =====================================================

@dataclass(frozen=True)
class Person:
    id: str
    first_name: str
    last_name: str
    email_addresses: tuple[str, ...] = ()
    receive_notifications: bool = True
    receive_emails: bool = True

    def as_dict(self):
        data = asdict(self)
        data["email_addresses"] = list(self.email_addresses)
        return data


@dataclass(frozen=True)
class GuardianLink:
    guardian: Person
    consent_required: bool = False


@dataclass(frozen=True)
class Member:
    person: Person
    guardians: tuple[GuardianLink, ...] = ()


# =====================================================
# GROUPING
# =====================================================

@dataclass(frozen=True)
class Entity:
    """An activity group with its members and supervising staff."""

    id: str
    name: str = ""
    members: tuple[Member, ...] = ()
    staff: tuple[Person, ...] = ()


@dataclass(frozen=True)
class CategoryNode:
    id: str
    name: str = ""
    subcategory_ids: tuple[str, ...] = ()
    entities: tuple[Entity, ...] = ()

    @property
    def is_branch(self) -> bool:
        return bool(self.subcategory_ids)


@dataclass(frozen=True)
class EventParticipation:
    event_id: str
    entity: Entity
    participant_ids: frozenset[str] = frozenset()


# =====================================================
# REQUESTS
# =====================================================

@dataclass(frozen=True)
class BySingleEntity:
    entity_id: str


@dataclass(frozen=True)
class ByCategorySubtree:
    category_id: str


@dataclass(frozen=True)
class ByEventParticipation:
    event_id: str
    entity_id: str


AudienceRequest = BySingleEntity | ByCategorySubtree | ByEventParticipation


# =====================================================
# AUDIENCE
# =====================================================

class RecipientAudience:
    """
    Recipients keyed by person id, in first-seen order.

    The first record added for an id is kept; later records
    for the same id are ignored.
    """

    def __init__(self):
        self._recipients: dict[str, Person] = {}

    def add(self, person: Person) -> bool:
        if person.id in self._recipients:
            return False
        self._recipients[person.id] = person
        return True

    def get(self, person_id: str) -> Optional[Person]:
        return self._recipients.get(person_id)

    @property
    def ids(self) -> list[str]:
        return list(self._recipients)

    def as_list(self) -> list[dict]:
        return [person.as_dict() for person in self]

    def __iter__(self) -> Iterator[Person]:
        return iter(self._recipients.values())

    def __len__(self):
        return len(self._recipients)

    def __contains__(self, person_id):
        return person_id in self._recipients

    def __repr__(self):
        return f"<RecipientAudience {len(self)} recipients>"


@dataclass(frozen=True)
class AudienceResult:
    audience: Optional[RecipientAudience] = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, audience):
        return cls(audience=audience)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def messages(self) -> list[str]:
        return [str(self.error)] if self.error else []

    def unwrap(self) -> RecipientAudience:
        """Return the audience or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.audience


# =====================================================
# CANCELLATION
# =====================================================

@dataclass(frozen=True)
class Cancellation:
    """
    Cooperative cancellation: an optional event plus an optional
    deadline on the monotonic clock.
    """

    event: Optional[threading.Event] = None
    deadline: Optional[float] = field(default=None)

    @classmethod
    def create(cls, *, cancel_event=None, timeout=None):
        deadline = None
        if timeout is not None:
            deadline = time.monotonic() + timeout
        return cls(event=cancel_event, deadline=deadline)

    def raise_if_cancelled(self):
        if self.event is not None and self.event.is_set():
            raise Cancelled("Audience resolution was cancelled.")
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise Cancelled("Audience resolution timed out.")


NO_CANCELLATION = Cancellation()
