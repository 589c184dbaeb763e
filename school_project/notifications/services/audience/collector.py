"""
Recursive collection of activity groups under a category.

A branch category (one with sub categories) contributes only
through its children; a leaf contributes the groups filed under
it. Groups reachable through several paths are kept once, at the
position where they were first found.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from .errors import CategoryNotFound, InvalidRequest
from .repository import call_repository
from .types import NO_CANCELLATION

logger = logging.getLogger(__name__)


def merge_entities(*partials):
    """
    Union partial results by entity id, keeping first-seen order.
    """
    merged = {}
    for partial in partials:
        for entity in partial:
            merged.setdefault(entity.id, entity)
    return tuple(merged.values())


class CategoryCollector:
    def __init__(self, repository, *, parallel=False, max_workers=4):
        self.repository = repository
        self.parallel = parallel
        self.max_workers = max_workers

    # =====================================================
    # PUBLIC API
    # =====================================================

    def collect(self, category_id, cancellation=NO_CANCELLATION):
        """
        Return every activity group beneath `category_id`.

        Raises CategoryNotFound if the root or any sub category is
        missing; the whole collection is aborted in that case.
        """
        if not category_id or not str(category_id).strip():
            raise InvalidRequest("CategoryId must be provided.")

        if self.parallel and self._can_fan_out():
            entities = self._collect_fanned_out(category_id, cancellation)
        else:
            if self.parallel:
                logger.debug(
                    "Repository refused worker threads; collecting %s sequentially",
                    category_id,
                )
            entities, _ = self._walk(category_id, frozenset(), cancellation)

        logger.debug(
            "Collected %d activity groups under category %s",
            len(entities),
            category_id,
        )
        return entities

    def collect_many(self, category_ids, cancellation=NO_CANCELLATION):
        """Union of `collect` over several roots."""
        return merge_entities(*(
            self.collect(category_id, cancellation)
            for category_id in category_ids
        ))

    # =====================================================
    # TRAVERSAL
    # =====================================================

    def _fetch(self, category_id, cancellation):
        cancellation.raise_if_cancelled()

        node = call_repository(self.repository.get_category_node, category_id)
        if node is None:
            raise CategoryNotFound(category_id)
        return node

    def _walk(self, category_id, visited, cancellation, path=frozenset()):
        """
        Returns (entities, visited). `visited` is handed back so
        siblings walked after this branch skip what it already saw;
        `path` holds the ancestors of `category_id` only.
        """
        if category_id in path:
            logger.warning(
                "Category %s is its own ancestor; skipping cycle",
                category_id,
            )
            return (), visited

        if category_id in visited:
            logger.debug(
                "Category %s already collected through another parent",
                category_id,
            )
            return (), visited

        node = self._fetch(category_id, cancellation)
        visited = visited | {category_id}

        if not node.is_branch:
            return merge_entities(node.entities), visited

        path = path | {category_id}
        partials = []
        for sub_id in node.subcategory_ids:
            found, visited = self._walk(sub_id, visited, cancellation, path)
            partials.append(found)

        return merge_entities(*partials), visited

    def _can_fan_out(self):
        # Repositories may refuse threads, e.g. inside a DB transaction
        check = getattr(self.repository, "supports_threads", None)
        return check is None or check()

    def _collect_fanned_out(self, category_id, cancellation):
        """
        One task per sub category of the root; each task walks its
        subtree sequentially and the partials are merged once here.
        """
        root = self._fetch(category_id, cancellation)
        if not root.is_branch:
            return merge_entities(root.entities)

        ancestors = frozenset({category_id})
        release = getattr(self.repository, "release_thread", None)

        def walk_child(sub_id):
            try:
                found, _ = self._walk(sub_id, ancestors, cancellation, ancestors)
                return found
            finally:
                if release is not None:
                    release()

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # map re-raises the first failure in child order
            partials = list(executor.map(walk_child, root.subcategory_ids))

        return merge_entities(*partials)
