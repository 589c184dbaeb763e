from django.db import models

from schools.models import ActivityGroup, generate_id


class Category(models.Model):
    """
    Node in the activity-group category tree.

    A category with sub categories only routes to its children;
    a category without sub categories holds activity groups.
    """

    id = models.CharField(
        primary_key=True,
        max_length=36,
        default=generate_id,
        editable=False,
    )

    name = models.CharField(max_length=150)
    description = models.TextField(blank=True)

    parent = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="sub_categories"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    @property
    def has_sub_categories(self):
        return self.sub_categories.exists()


class EntityCategory(models.Model):
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name="entity_collection"
    )
    activity_group = models.ForeignKey(
        ActivityGroup,
        on_delete=models.CASCADE,
        related_name="category_links"
    )

    class Meta:
        ordering = ["id"]
        unique_together = ("category", "activity_group")
        verbose_name_plural = "entity categories"

    def __str__(self):
        return f"{self.activity_group} in {self.category}"
