"""
Base classes and interfaces for candidate fetchers.

This module provides the abstract base class that every catalog fetcher
implements, and a requests-based base class for catalogs queried over HTTP.
"""

import abc
import logging
from typing import Any, Dict, Iterable, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from archlink import __version__
from archlink.core.exceptions import SourceFetchError
from archlink.core.interfaces import Candidate, FetcherConfig, PackageSource


logger = logging.getLogger(__name__)


def collapse_duplicates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """
    Collapse repeated emissions of the same name, keeping the first.

    Only use this on candidates from a single source: the same package may
    legitimately appear once per catalog.
    """
    seen = set()
    result = []
    for candidate in candidates:
        if candidate.name in seen:
            continue
        seen.add(candidate.name)
        result.append(candidate)
    return result


class CandidateFetcher(abc.ABC):
    """
    Abstract base class for candidate fetchers.

    A fetcher queries one catalog and turns its records into candidates.
    Every failure, whether transport, HTTP status, malformed payload or
    subprocess, is raised as SourceFetchError.
    """

    source: PackageSource = PackageSource.UNKNOWN

    def __init__(self, config: Optional[FetcherConfig] = None):
        """
        Initialize the fetcher.

        Args:
            config: Configuration for the fetcher. If None, uses default configuration.
        """
        self.config = config or FetcherConfig()

    @abc.abstractmethod
    def search_packages(self, query: str) -> List[Candidate]:
        """
        Search the catalog for packages matching the query.

        Args:
            query: Search query.

        Returns:
            Candidates found in this catalog, each name at most once.

        Raises:
            SourceFetchError: If the catalog cannot be queried.
        """
        pass

    @abc.abstractmethod
    def get_repository_name(self) -> str:
        """
        Get the human-readable name of the catalog.
        """
        pass

    def _make_candidate(self, name: Any, version: Any, description: Any) -> Optional[Candidate]:
        """
        Build a candidate from raw record fields, or None if the name is empty.
        """
        name = str(name).strip() if name is not None else ""
        if not name:
            logger.debug(f"Skipping {self.get_repository_name()} record without a name")
            return None
        return Candidate(
            name=name,
            version=str(version) if version is not None else "",
            description=str(description).strip() if description else "",
            source=self.source
        )


class HttpCandidateFetcher(CandidateFetcher):
    """
    Base class for fetchers that query a JSON HTTP endpoint.
    """

    def __init__(self, base_url: str, config: Optional[FetcherConfig] = None):
        """
        Initialize the HTTP fetcher.

        Args:
            base_url: Base URL of the catalog.
            config: Configuration for the fetcher.
        """
        super().__init__(config)
        self.base_url = base_url.rstrip('/')
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """
        Create a requests session.

        Returns:
            A configured requests session.
        """
        session = requests.Session()

        retry_strategy = Retry(
            total=self.config.retry_count,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "HEAD"],
            raise_on_status=False
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({"User-Agent": f"{self.config.user_agent}/{__version__}"})

        return session

    def _get_url(self, path: str) -> str:
        path = path.lstrip('/')
        return f"{self.base_url}/{path}"

    def _fetch_json(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        """
        Fetch and decode a JSON document.

        Args:
            path: Path to append to the base URL.
            params: Query string parameters.

        Returns:
            Parsed JSON data.

        Raises:
            SourceFetchError: If the request fails or the body is not JSON.
        """
        url = self._get_url(path)
        name = self.get_repository_name()

        try:
            response = self.session.get(url, params=params, timeout=self.config.request_timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise SourceFetchError(name, f"request to {url} timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise SourceFetchError(name, f"request to {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"Response content (first 500 chars): {response.text[:500]}")
            raise SourceFetchError(name, f"malformed JSON from {url}: {e}") from e

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
