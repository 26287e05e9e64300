"""
AUR fetcher for archlink.

This module searches the Arch User Repository through its RPC interface.
"""

import logging
from typing import Any, Dict, List, Optional

from archlink.core.exceptions import SourceFetchError
from archlink.core.interfaces import Candidate, FetcherConfig, PackageSource
from archlink.fetcher.base import HttpCandidateFetcher, collapse_duplicates


logger = logging.getLogger(__name__)


AUR_BASE_URL = "https://aur.archlinux.org"


class AurFetcher(HttpCandidateFetcher):
    """
    Fetcher for the Arch User Repository.

    Queries ``/rpc/?v=5&type=search&arg=<query>``, which answers with a JSON
    object whose ``results`` array holds ``Name``, ``Version`` and an
    optional ``Description`` per package.
    """

    source = PackageSource.AUR

    def __init__(self, config: Optional[FetcherConfig] = None, base_url: str = AUR_BASE_URL):
        super().__init__(base_url=base_url, config=config)

    def get_repository_name(self) -> str:
        return "AUR"

    def search_packages(self, query: str) -> List[Candidate]:
        data = self._fetch_json("rpc/", params={"v": "5", "type": "search", "arg": query})

        if not isinstance(data, dict):
            raise SourceFetchError(self.get_repository_name(), "unexpected response: not a JSON object")

        if data.get("type") == "error":
            raise SourceFetchError(self.get_repository_name(), data.get("error") or "unknown RPC error")

        results = data.get("results")
        if not isinstance(results, list):
            raise SourceFetchError(self.get_repository_name(), "unexpected response: missing 'results' array")

        candidates = []
        for record in results:
            if not isinstance(record, dict):
                continue
            candidate = self._make_candidate(
                self._field(record, "Name"),
                self._field(record, "Version"),
                self._field(record, "Description")
            )
            if candidate is not None:
                candidates.append(candidate)

        logger.debug(f"AUR returned {len(candidates)} candidates for '{query}'")
        return collapse_duplicates(candidates)

    @staticmethod
    def _field(record: Dict[str, Any], key: str) -> Any:
        # The RPC uses capitalised keys; accept lower-case mirrors as well
        if key in record:
            return record[key]
        return record.get(key.lower())
