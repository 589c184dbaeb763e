import logging

from .types import RecipientAudience

logger = logging.getLogger(__name__)


def accumulate(candidates, audience=None):
    """
    Fold recipient candidates into an audience.

    First write wins: a later candidate with an id already in the
    audience is dropped whole, its flags and emails are not merged.
    """
    if audience is None:
        audience = RecipientAudience()

    for person in candidates:
        if not audience.add(person):
            logger.debug("Dropping duplicate recipient %s", person.id)

    return audience
