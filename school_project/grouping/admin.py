from django.contrib import admin

from .models import Category, EntityCategory


class SubCategoryInline(admin.TabularInline):
    model = Category
    fk_name = "parent"
    fields = ("name", "description")
    extra = 0
    show_change_link = True


class EntityCategoryInline(admin.TabularInline):
    model = EntityCategory
    extra = 0
    autocomplete_fields = ("activity_group",)


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "parent", "has_sub_categories", "created_at")
    list_select_related = ("parent",)
    search_fields = ("name",)
    autocomplete_fields = ("parent",)
    inlines = [SubCategoryInline, EntityCategoryInline]
