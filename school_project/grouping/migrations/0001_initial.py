import django.db.models.deletion
from django.db import migrations, models

import schools.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("schools", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Category",
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
                ("name", models.CharField(max_length=150)),
                ("description", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sub_categories",
                        to="grouping.category",
                    ),
                ),
            ],
            options={
                "ordering": ["name", "id"],
                "verbose_name_plural": "categories",
            },
        ),
        migrations.CreateModel(
            name="EntityCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "activity_group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="category_links",
                        to="schools.activitygroup",
                    ),
                ),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="entity_collection",
                        to="grouping.category",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "unique_together": {("category", "activity_group")},
                "verbose_name_plural": "entity categories",
            },
        ),
    ]
