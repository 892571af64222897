"""
Directory Search

Partial-text profile lookup for the admin user picker.
"""
import logging
from typing import Iterator, Optional

from backoffice.modules.users.domain.profile import SearchResult
from backoffice.modules.users.repositories.profile_repository import ProfileRepository
from backoffice.modules.users.services.policies import guarded

logger = logging.getLogger("backoffice.users.search")

MIN_QUERY_LENGTH = 3
MAX_RESULTS = 5


def _no_results() -> Iterator[SearchResult]:
    return iter(())


class DirectorySearchService:
    """Looks up candidate profiles by email or full name."""

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    @guarded("search_profiles", fallback=_no_results)
    async def search_profiles(self, query: Optional[str]) -> Iterator[SearchResult]:
        """
        Return at most five matches for ``query``.

        Queries shorter than three characters return nothing without
        touching storage. The result is a one-shot iterator; call again to
        re-query.
        """
        if not query or len(query) < MIN_QUERY_LENGTH:
            return _no_results()

        logger.debug(f"[DirectorySearchService.search_profiles] query={query!r}")
        rows = await self.repository.search(query, limit=MAX_RESULTS)
        return (SearchResult.from_dict(row) for row in rows[:MAX_RESULTS])
