"""
Errors raised while resolving an audience.

Every error is terminal for the current resolution. Callers
switch on `code` (views map it to an HTTP status).
"""


class AudienceError(Exception):
    code = "audience_error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message())

    def default_message(self):
        return "Audience could not be resolved."

    @property
    def message(self):
        return str(self)


class InvalidRequest(AudienceError):
    code = "invalid_request"


class CategoryNotFound(AudienceError):
    code = "category_not_found"

    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(f"Category '{category_id}' not found.")


class EntityNotFound(AudienceError):
    code = "entity_not_found"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"Activity group '{entity_id}' not found.")


class EventNotFound(AudienceError):
    code = "event_not_found"

    def __init__(self, event_id, entity_id=None):
        self.event_id = event_id
        self.entity_id = entity_id
        if entity_id:
            message = (
                f"Activity group '{entity_id}' is not participating "
                f"in event '{event_id}'."
            )
        else:
            message = f"Event '{event_id}' not found."
        super().__init__(message)


class RepositoryError(AudienceError):
    """Wraps a failure raised by the storage collaborator."""

    code = "repository_error"

    def __init__(self, message, *, original=None):
        self.original = original
        super().__init__(message)


class Cancelled(AudienceError):
    code = "cancelled"
