"""
Expansion of activity groups into recipient candidates.

Emission order per group: each learner followed by its parents,
then the teacher. Duplicates are expected here; `accumulate` removes them.
"""

from dataclasses import replace

from .types import NO_CANCELLATION


def member_recipient(person):
    # Learners always receive both channels
    return replace(person, receive_notifications=True, receive_emails=True)


def guardian_recipient(person):
    return person


def staff_recipient(person):
    # Teachers get in-app notifications only
    return replace(person, receive_notifications=True, receive_emails=False)


def expand_entity(entity, members=None):
    """
    Yield candidates for one group.

    `members` restricts expansion to a subset of the group's
    members; guardians follow the restricted set.
    """
    if members is None:
        members = entity.members

    for member in members:
        yield member_recipient(member.person)
        for link in member.guardians:
            yield guardian_recipient(link.guardian)

    for person in entity.staff:
        yield staff_recipient(person)


def expand(entities, cancellation=NO_CANCELLATION):
    candidates = []
    for entity in entities:
        cancellation.raise_if_cancelled()
        candidates.extend(expand_entity(entity))
    return candidates


def participating_members(participation):
    # Walk current members so guardians come from the loaded links;
    # participants who left the group since the event are not notified
    return tuple(
        member
        for member in participation.entity.members
        if member.person.id in participation.participant_ids
    )


def expand_participation(participation, cancellation=NO_CANCELLATION):
    """Candidates for the learners taking part in one event."""
    cancellation.raise_if_cancelled()
    return list(expand_entity(
        participation.entity,
        members=participating_members(participation),
    ))
