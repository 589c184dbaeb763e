import django.db.models.deletion
from django.db import migrations, models

import schools.models


def person_fields():
    return [
        (
            "id",
            models.CharField(
                default=schools.models.generate_id,
                editable=False,
                max_length=36,
                primary_key=True,
                serialize=False,
            ),
        ),
        ("first_name", models.CharField(max_length=150)),
        ("last_name", models.CharField(max_length=150)),
        (
            "receive_notifications",
            models.BooleanField(default=True, help_text="Accepts in-app notifications"),
        ),
        (
            "receive_emails",
            models.BooleanField(default=True, help_text="Accepts email notifications"),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Learner",
            fields=person_fields(),
            options={
                "ordering": ["last_name", "first_name"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Parent",
            fields=person_fields(),
            options={
                "ordering": ["last_name", "first_name"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Teacher",
            fields=person_fields(),
            options={
                "ordering": ["last_name", "first_name"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="EmailAddress",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("person_id", models.CharField(db_index=True, max_length=36)),
                ("email", models.EmailField(max_length=254)),
            ],
            options={
                "ordering": ["id"],
                "unique_together": {("person_id", "email")},
            },
        ),
        migrations.CreateModel(
            name="LearnerParent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "consent_required",
                    models.BooleanField(
                        default=False,
                        help_text="Parent must consent before the learner takes part in events",
                    ),
                ),
                (
                    "learner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="parent_links",
                        to="schools.learner",
                    ),
                ),
                (
                    "parent",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="learner_links",
                        to="schools.parent",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "unique_together": {("learner", "parent")},
            },
        ),
        migrations.CreateModel(
            name="ActivityGroup",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=schools.models.generate_id,
                        editable=False,
                        max_length=36,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=200)),
                ("is_deleted", models.BooleanField(db_index=True, default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "teacher",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="activity_groups",
                        to="schools.teacher",
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ActivityGroupTeamMember",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "activity_group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="team_members",
                        to="schools.activitygroup",
                    ),
                ),
                (
                    "learner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="activity_group_memberships",
                        to="schools.learner",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "unique_together": {("activity_group", "learner")},
            },
        ),
        migrations.CreateModel(
            name="SchoolEvent",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=schools.models.generate_id,
                        editable=False,
                        max_length=36,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=200)),
                ("starts_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-starts_at", "name"],
            },
        ),
        migrations.CreateModel(
            name="ParticipatingActivityGroup",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "activity_group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="event_participations",
                        to="schools.activitygroup",
                    ),
                ),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="participating_activity_groups",
                        to="schools.schoolevent",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "unique_together": {("event", "activity_group")},
            },
        ),
        migrations.CreateModel(
            name="ParticipatingTeamMember",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "learner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="event_participations",
                        to="schools.learner",
                    ),
                ),
                (
                    "participating_group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="participating_team_members",
                        to="schools.participatingactivitygroup",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "unique_together": {("participating_group", "learner")},
            },
        ),
    ]
