"""
Concurrent aggregation of candidate fetchers.

This module runs every configured fetcher at the same time, waits for all
of them, and merges whatever they produced. A failing source never fails the
aggregation; it is reported and contributes nothing.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from archlink.core.exceptions import SourceFetchError
from archlink.core.interfaces import Candidate
from archlink.fetcher.base import CandidateFetcher


logger = logging.getLogger(__name__)


WarningHandler = Callable[[SourceFetchError], None]


def log_source_warning(error: SourceFetchError) -> None:
    """Default warning handler: log the failure."""
    logger.warning(f"{error.source} search failed: {error.message}")


class SearchAggregator:
    """
    Queries several catalogs concurrently and merges their candidates.

    Each fetcher runs in its own worker thread and fills its own result list;
    the lists are only merged after every worker has finished, so no locking
    is needed.
    """

    def __init__(
        self,
        fetchers: Sequence[CandidateFetcher],
        warning_handler: Optional[WarningHandler] = None
    ):
        """
        Initialize the aggregator.

        Args:
            fetchers: Fetchers to query. Their results are merged in this order.
            warning_handler: Called once per failing source. Defaults to logging.
        """
        self.fetchers = list(fetchers)
        self.warning_handler = warning_handler or log_source_warning

    def aggregate(self, query: str) -> List[Candidate]:
        """
        Search every catalog and merge the results.

        Args:
            query: Search query.

        Returns:
            Merged candidates; empty if every source failed or found nothing.
        """
        if not self.fetchers:
            logger.warning("No fetchers configured for search")
            return []

        with ThreadPoolExecutor(max_workers=len(self.fetchers)) as executor:
            futures = [
                executor.submit(fetcher.search_packages, query)
                for fetcher in self.fetchers
            ]
            # Join on every future in registration order
            results = [self._collect(fetcher, future) for fetcher, future in zip(self.fetchers, futures)]

        merged = []
        for candidates in results:
            merged.extend(candidates)

        logger.debug(f"Aggregated {len(merged)} candidates from {len(self.fetchers)} sources for '{query}'")
        return merged

    def _collect(self, fetcher: CandidateFetcher, future) -> List[Candidate]:
        """
        Wait for one fetcher and turn any failure into an empty result.
        """
        try:
            candidates = future.result()
            logger.debug(f"{fetcher.get_repository_name()} returned {len(candidates)} candidates")
            return list(candidates)
        except SourceFetchError as e:
            error = e
        except Exception as e:
            logger.debug(f"Unexpected error from {fetcher.get_repository_name()}", exc_info=True)
            error = SourceFetchError(fetcher.get_repository_name(), str(e))

        self.warning_handler(error)
        return []
