"""
Package search engine.

This module ties together the aggregator and the ranker: it validates the
query, collects candidates from every catalog and returns the top matches.
"""

import logging
from typing import List, Optional, Sequence

from archlink.core.exceptions import EmptyResultError, InputValidationError
from archlink.core.interfaces import ArchLinkConfig, Candidate
from archlink.fetcher.aur import AurFetcher
from archlink.fetcher.base import CandidateFetcher
from archlink.fetcher.official import OfficialRepoFetcher
from archlink.search.aggregator import SearchAggregator, WarningHandler
from archlink.search.ranking import SearchRanker


logger = logging.getLogger(__name__)


class PackageSearchEngine:
    """
    Searches the official repositories and the AUR and ranks the results.
    """

    def __init__(
        self,
        config: Optional[ArchLinkConfig] = None,
        fetchers: Optional[Sequence[CandidateFetcher]] = None,
        warning_handler: Optional[WarningHandler] = None
    ):
        """
        Initialize the search engine.

        Args:
            config: Runtime configuration; supplies max_results.
            fetchers: Fetchers to query. Defaults to official repos then AUR.
            warning_handler: Called for every failing source.
        """
        self.config = config or ArchLinkConfig()
        if fetchers is None:
            fetcher_config = self.config.fetcher_config()
            fetchers = [
                OfficialRepoFetcher(config=fetcher_config),
                AurFetcher(config=fetcher_config)
            ]
        self.aggregator = SearchAggregator(fetchers, warning_handler=warning_handler)
        self.ranker = SearchRanker()

    def search(self, query: str, limit: Optional[int] = None) -> List[Candidate]:
        """
        Search for packages.

        Args:
            query: Search query.
            limit: Maximum number of results. Defaults to config.max_results.

        Returns:
            Ranked candidates, never empty.

        Raises:
            InputValidationError: If the query is empty.
            EmptyResultError: If no source produced any candidate.
        """
        query = (query or "").strip()
        if not query:
            raise InputValidationError("Query cannot be empty.")

        limit = limit or self.config.max_results
        logger.info(f"Searching for '{query}' across {len(self.aggregator.fetchers)} sources")

        candidates = self.aggregator.aggregate(query)
        ranked = self.ranker.rank_results(candidates, query, limit)

        if not ranked:
            raise EmptyResultError(query)

        logger.info(f"Found {len(ranked)} matches for '{query}'")
        return ranked
