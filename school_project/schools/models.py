import uuid

from django.db import models


def generate_id():
    return str(uuid.uuid4())


# ============================================================
# PEOPLE
# ============================================================

class SchoolPerson(models.Model):
    """
    Shared identity for learners, parents and teachers.

    Ids live in one identity space: a parent of one learner may be
    stored again as a teacher under the same id.
    """

    id = models.CharField(
        primary_key=True,
        max_length=36,
        default=generate_id,
        editable=False,
    )

    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)

    receive_notifications = models.BooleanField(
        default=True,
        help_text="Accepts in-app notifications"
    )
    receive_emails = models.BooleanField(
        default=True,
        help_text="Accepts email notifications"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["last_name", "first_name"]

    def __str__(self):
        return f"{self.first_name} {self.last_name}".strip()


class Learner(SchoolPerson):
    pass


class Parent(SchoolPerson):
    pass


class Teacher(SchoolPerson):
    pass


class EmailAddress(models.Model):
    """
    Email address of any SchoolPerson, keyed by the shared person id.
    """

    person_id = models.CharField(max_length=36, db_index=True)
    email = models.EmailField()

    class Meta:
        ordering = ["id"]
        unique_together = ("person_id", "email")

    def __str__(self):
        return self.email


class LearnerParent(models.Model):
    learner = models.ForeignKey(
        Learner,
        on_delete=models.CASCADE,
        related_name="parent_links"
    )
    parent = models.ForeignKey(
        Parent,
        on_delete=models.CASCADE,
        related_name="learner_links"
    )

    consent_required = models.BooleanField(
        default=False,
        help_text="Parent must consent before the learner takes part in events"
    )

    class Meta:
        ordering = ["id"]
        unique_together = ("learner", "parent")

    def __str__(self):
        return f"{self.parent} → {self.learner}"


# ============================================================
# ACTIVITY GROUPS
# ============================================================

class ActivityGroup(models.Model):
    id = models.CharField(
        primary_key=True,
        max_length=36,
        default=generate_id,
        editable=False,
    )

    name = models.CharField(max_length=200)

    teacher = models.ForeignKey(
        Teacher,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="activity_groups"
    )

    is_deleted = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class ActivityGroupTeamMember(models.Model):
    activity_group = models.ForeignKey(
        ActivityGroup,
        on_delete=models.CASCADE,
        related_name="team_members"
    )
    learner = models.ForeignKey(
        Learner,
        on_delete=models.CASCADE,
        related_name="activity_group_memberships"
    )

    class Meta:
        ordering = ["id"]
        unique_together = ("activity_group", "learner")

    def __str__(self):
        return f"{self.learner} @ {self.activity_group}"


# ============================================================
# EVENTS
# ============================================================

class SchoolEvent(models.Model):
    id = models.CharField(
        primary_key=True,
        max_length=36,
        default=generate_id,
        editable=False,
    )

    name = models.CharField(max_length=200)
    starts_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-starts_at", "name"]

    def __str__(self):
        return self.name


class ParticipatingActivityGroup(models.Model):
    """
    An activity group taking part in one event occurrence.
    """

    event = models.ForeignKey(
        SchoolEvent,
        on_delete=models.CASCADE,
        related_name="participating_activity_groups"
    )
    activity_group = models.ForeignKey(
        ActivityGroup,
        on_delete=models.CASCADE,
        related_name="event_participations"
    )

    class Meta:
        ordering = ["id"]
        unique_together = ("event", "activity_group")

    def __str__(self):
        return f"{self.activity_group} @ {self.event}"


class ParticipatingTeamMember(models.Model):
    participating_group = models.ForeignKey(
        ParticipatingActivityGroup,
        on_delete=models.CASCADE,
        related_name="participating_team_members"
    )
    learner = models.ForeignKey(
        Learner,
        on_delete=models.CASCADE,
        related_name="event_participations"
    )

    class Meta:
        ordering = ["id"]
        unique_together = ("participating_group", "learner")
