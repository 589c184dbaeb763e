"""
ORM-backed AudienceRepository.

Every lookup eagerly loads what recipient expansion needs
(team members, their parents, the teacher, email addresses) so
expansion never goes back to the database.
"""

from collections import defaultdict

from django.db import connection
from django.db.models import Prefetch

from grouping.models import Category, EntityCategory
from schools.models import (
    ActivityGroup,
    ActivityGroupTeamMember,
    EmailAddress,
    LearnerParent,
    ParticipatingActivityGroup,
)

from .types import (
    CategoryNode,
    Entity,
    EventParticipation,
    GuardianLink,
    Member,
    Person,
)


def group_prefetch():
    return (
        Prefetch(
            "team_members",
            queryset=ActivityGroupTeamMember.objects
            .select_related("learner")
            .order_by("id"),
        ),
        Prefetch(
            "team_members__learner__parent_links",
            queryset=LearnerParent.objects
            .select_related("parent")
            .order_by("id"),
        ),
    )


def to_person(record, emails):
    return Person(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        email_addresses=tuple(emails.get(record.id, ())),
        receive_notifications=record.receive_notifications,
        receive_emails=record.receive_emails,
    )


class DjangoAudienceRepository:

    # =====================================================
    # THREADS
    # =====================================================
    def supports_threads(self):
        # Worker threads get their own connection and cannot see
        # rows written by an open transaction in the caller
        return not connection.in_atomic_block

    def release_thread(self):
        connection.close()

    # =====================================================
    # CATEGORY
    # =====================================================
    def get_category_node(self, category_id):
        category = Category.objects.filter(pk=category_id).first()
        if category is None:
            return None

        sub_ids = tuple(
            category.sub_categories
            .order_by("name", "id")
            .values_list("id", flat=True)
        )

        # Soft-deleted groups are never filed under a node
        group_ids = list(
            EntityCategory.objects
            .filter(category=category, activity_group__is_deleted=False)
            .order_by("id")
            .values_list("activity_group_id", flat=True)
        )

        return CategoryNode(
            id=category.id,
            name=category.name,
            subcategory_ids=sub_ids,
            entities=self.load_entities(group_ids),
        )

    # =====================================================
    # ACTIVITY GROUP
    # =====================================================
    def get_entity_with_relations(self, entity_id):
        entities = self.load_entities([entity_id])
        return entities[0] if entities else None

    # =====================================================
    # EVENT PARTICIPATION
    # =====================================================
    def get_event_participation(self, event_id, entity_id):
        participation = (
            ParticipatingActivityGroup.objects
            .filter(
                event_id=event_id,
                activity_group_id=entity_id,
                activity_group__is_deleted=False,
            )
            .prefetch_related("participating_team_members")
            .first()
        )
        if participation is None:
            return None

        entity = self.get_entity_with_relations(entity_id)
        if entity is None:
            return None

        return EventParticipation(
            event_id=event_id,
            entity=entity,
            participant_ids=frozenset(
                member.learner_id
                for member in participation.participating_team_members.all()
            ),
        )

    # =====================================================
    # LOADING HELPERS
    # =====================================================
    def load_entities(self, group_ids):
        """
        Map activity group ids onto Entity values, in the order
        given. Unknown and soft-deleted ids are left out.
        """
        if not group_ids:
            return ()

        groups = (
            ActivityGroup.objects
            .filter(pk__in=group_ids, is_deleted=False)
            .select_related("teacher")
            .prefetch_related(*group_prefetch())
        )
        by_id = {group.id: group for group in groups}
        ordered = [by_id[gid] for gid in dict.fromkeys(group_ids) if gid in by_id]

        emails = self._emails_for(ordered)
        return tuple(self._to_entity(group, emails) for group in ordered)

    def _emails_for(self, groups):
        person_ids = set()
        for group in groups:
            if group.teacher_id:
                person_ids.add(group.teacher_id)
            for team_member in group.team_members.all():
                person_ids.add(team_member.learner_id)
                for link in team_member.learner.parent_links.all():
                    person_ids.add(link.parent_id)

        emails = defaultdict(list)
        rows = (
            EmailAddress.objects
            .filter(person_id__in=person_ids)
            .order_by("id")
            .values_list("person_id", "email")
        )
        for person_id, email in rows:
            emails[person_id].append(email)
        return emails

    def _to_entity(self, group, emails):
        members = tuple(
            Member(
                person=to_person(team_member.learner, emails),
                guardians=tuple(
                    GuardianLink(
                        guardian=to_person(link.parent, emails),
                        consent_required=link.consent_required,
                    )
                    for link in team_member.learner.parent_links.all()
                ),
            )
            for team_member in group.team_members.all()
        )

        staff = ()
        if group.teacher is not None:
            staff = (to_person(group.teacher, emails),)

        return Entity(
            id=group.id,
            name=group.name,
            members=members,
            staff=staff,
        )
