from django.http import JsonResponse
from django.views.decorators.http import require_GET

from notifications.services.audience import (
    ByCategorySubtree,
    ByEventParticipation,
    BySingleEntity,
    resolve_audience,
)


ERROR_STATUS = {
    "invalid_request": 400,
    "category_not_found": 404,
    "entity_not_found": 404,
    "event_not_found": 404,
    "repository_error": 502,
    "cancelled": 503,
}


def audience_response(result):
    if not result.succeeded:
        return JsonResponse(
            {
                "succeeded": False,
                "error": result.error.code,
                "messages": result.messages,
            },
            status=ERROR_STATUS.get(result.error.code, 500),
        )

    return JsonResponse({
        "succeeded": True,
        "count": len(result.audience),
        "recipients": result.audience.as_list(),
    })


@require_GET
def activity_group_recipients(request, activity_group_id):
    return audience_response(
        resolve_audience(BySingleEntity(activity_group_id))
    )


@require_GET
def category_recipients(request, category_id):
    return audience_response(
        resolve_audience(ByCategorySubtree(category_id))
    )


@require_GET
def event_group_recipients(request, event_id, activity_group_id):
    return audience_response(
        resolve_audience(ByEventParticipation(event_id, activity_group_id))
    )
