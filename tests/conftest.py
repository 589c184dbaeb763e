import pytest

from audience_fakes import InMemoryRepository, branch, group, leaf, member, person


# ============================================================
# IN-MEMORY ENGINE FIXTURES
# ============================================================

@pytest.fixture
def sports_repository():
    """
    Sports (branch) -> Soccer (leaf: A), Swimming (leaf: A, B)
    """
    parent_1 = person("parent-1", emails=["p1@example.com"], notifications=True, emails_ok=False)
    learner_1 = person("learner-1")
    learner_2 = person("learner-2")
    learner_3 = person("learner-3")
    coach = person("coach-1", emails=["coach@example.com"])
    swim_coach = person("coach-2")

    group_a = group(
        "group-a",
        members=[member(learner_1, parent_1), member(learner_2)],
        staff=[coach],
    )
    group_b = group(
        "group-b",
        members=[member(learner_3, parent_1), member(learner_1)],
        staff=[swim_coach],
    )

    return InMemoryRepository(
        categories=[
            branch("sports", "soccer", "swimming"),
            leaf("soccer", group_a),
            leaf("swimming", group_a, group_b),
        ],
        entities=[group_a, group_b],
    )


# ============================================================
# ORM FIXTURES
# ============================================================

@pytest.fixture
def school_data(db):
    """
    Persisted school with the same Sports tree plus a soft-deleted
    group and one event.
    """
    from grouping.models import Category, EntityCategory
    from schools.models import (
        ActivityGroup,
        ActivityGroupTeamMember,
        EmailAddress,
        Learner,
        LearnerParent,
        Parent,
        ParticipatingActivityGroup,
        ParticipatingTeamMember,
        SchoolEvent,
        Teacher,
    )

    teacher = Teacher.objects.create(id="teacher-1", first_name="Tess", last_name="Coach")
    parent = Parent.objects.create(
        id="parent-1",
        first_name="Pam",
        last_name="Parent",
        receive_notifications=True,
        receive_emails=False,
    )
    learner_1 = Learner.objects.create(
        id="learner-1",
        first_name="Lee",
        last_name="One",
        receive_notifications=False,
        receive_emails=False,
    )
    learner_2 = Learner.objects.create(id="learner-2", first_name="Lou", last_name="Two")
    learner_3 = Learner.objects.create(id="learner-3", first_name="Lia", last_name="Three")

    EmailAddress.objects.create(person_id="parent-1", email="pam@example.com")
    EmailAddress.objects.create(person_id="parent-1", email="pam.work@example.com")
    EmailAddress.objects.create(person_id="teacher-1", email="tess@example.com")
    EmailAddress.objects.create(person_id="learner-1", email="lee@example.com")

    LearnerParent.objects.create(learner=learner_1, parent=parent, consent_required=True)

    soccer_team = ActivityGroup.objects.create(id="group-a", name="Soccer U12", teacher=teacher)
    swim_team = ActivityGroup.objects.create(id="group-b", name="Swim Squad")
    old_team = ActivityGroup.objects.create(id="group-old", name="Old Team", is_deleted=True)

    for grp, learners in (
        (soccer_team, [learner_1, learner_2]),
        (swim_team, [learner_3]),
        (old_team, [learner_2]),
    ):
        for learner in learners:
            ActivityGroupTeamMember.objects.create(activity_group=grp, learner=learner)

    sports = Category.objects.create(id="sports", name="Sports")
    soccer = Category.objects.create(id="soccer", name="Soccer", parent=sports)
    swimming = Category.objects.create(id="swimming", name="Swimming", parent=sports)

    EntityCategory.objects.create(category=soccer, activity_group=soccer_team)
    EntityCategory.objects.create(category=swimming, activity_group=soccer_team)
    EntityCategory.objects.create(category=swimming, activity_group=swim_team)
    EntityCategory.objects.create(category=swimming, activity_group=old_team)

    gala = SchoolEvent.objects.create(id="event-1", name="Gala")
    taking_part = ParticipatingActivityGroup.objects.create(event=gala, activity_group=soccer_team)
    ParticipatingTeamMember.objects.create(participating_group=taking_part, learner=learner_2)

    return {
        "teacher": teacher,
        "parent": parent,
        "learners": [learner_1, learner_2, learner_3],
        "groups": [soccer_team, swim_team, old_team],
        "categories": [sports, soccer, swimming],
        "event": gala,
    }
