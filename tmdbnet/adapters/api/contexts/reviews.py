"""Facade des operations sur les critiques."""

from tmdbnet.adapters.api.contexts.base import ResourceContext, path_segment
from tmdbnet.core.entities import Review
from tmdbnet.core.value_objects import Command


class ReviewsContext(ResourceContext):
    async def get(self, review_id: str) -> Review:
        command = Command(f"review/{path_segment(review_id)}")
        return await self._executor.get(command, Review)
