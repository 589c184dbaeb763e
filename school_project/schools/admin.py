from django.contrib import admin

from .models import (
    Learner,
    Parent,
    Teacher,
    EmailAddress,
    LearnerParent,
    ActivityGroup,
    ActivityGroupTeamMember,
    SchoolEvent,
    ParticipatingActivityGroup,
    ParticipatingTeamMember,
)

PERSON_LIST_DISPLAY = (
    "last_name",
    "first_name",
    "receive_notifications",
    "receive_emails",
    "created_at",
)

PERSON_SEARCH_FIELDS = (
    "id",
    "first_name",
    "last_name",
)


# ============================================================
# PEOPLE
# ============================================================

class LearnerParentInline(admin.TabularInline):
    model = LearnerParent
    extra = 0
    autocomplete_fields = ("parent",)


@admin.register(Learner)
class LearnerAdmin(admin.ModelAdmin):
    list_display = PERSON_LIST_DISPLAY
    search_fields = PERSON_SEARCH_FIELDS
    inlines = [LearnerParentInline]


@admin.register(Parent)
class ParentAdmin(admin.ModelAdmin):
    list_display = PERSON_LIST_DISPLAY
    list_filter = ("receive_notifications", "receive_emails")
    search_fields = PERSON_SEARCH_FIELDS


@admin.register(Teacher)
class TeacherAdmin(admin.ModelAdmin):
    list_display = PERSON_LIST_DISPLAY
    search_fields = PERSON_SEARCH_FIELDS


@admin.register(EmailAddress)
class EmailAddressAdmin(admin.ModelAdmin):
    list_display = ("email", "person_id")
    search_fields = ("email", "person_id")


# ============================================================
# ACTIVITY GROUPS
# ============================================================

class TeamMemberInline(admin.TabularInline):
    model = ActivityGroupTeamMember
    extra = 0
    autocomplete_fields = ("learner",)


@admin.register(ActivityGroup)
class ActivityGroupAdmin(admin.ModelAdmin):
    list_display = ("name", "teacher", "is_deleted", "created_at")
    list_filter = ("is_deleted",)
    search_fields = ("name",)
    autocomplete_fields = ("teacher",)
    inlines = [TeamMemberInline]


# ============================================================
# EVENTS
# ============================================================

class ParticipatingTeamMemberInline(admin.TabularInline):
    model = ParticipatingTeamMember
    extra = 0
    autocomplete_fields = ("learner",)


@admin.register(SchoolEvent)
class SchoolEventAdmin(admin.ModelAdmin):
    list_display = ("name", "starts_at", "created_at")
    search_fields = ("name",)


@admin.register(ParticipatingActivityGroup)
class ParticipatingActivityGroupAdmin(admin.ModelAdmin):
    list_display = ("event", "activity_group")
    list_select_related = ("event", "activity_group")
    autocomplete_fields = ("event", "activity_group")
    inlines = [ParticipatingTeamMemberInline]
