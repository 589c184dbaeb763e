from django.http import JsonResponse
from django.views.decorators.http import require_GET

from schools.services import (
    activity_groups_for_categories,
    event_activity_groups,
    parse_category_ids,
)


def serialize_group(group):
    return {
        "id": group.id,
        "name": group.name,
        "teacher_id": group.teacher_id,
    }


@require_GET
def activity_groups_by_categories(request):
    category_ids = parse_category_ids(request.GET.get("category_ids"))
    if not category_ids:
        return JsonResponse([], safe=False)

    groups = activity_groups_for_categories(category_ids)
    return JsonResponse(
        [serialize_group(group) for group in groups],
        safe=False
    )


@require_GET
def activity_groups_by_event(request, event_id):
    return JsonResponse(
        [serialize_group(group) for group in event_activity_groups(event_id)],
        safe=False
    )
