"""
Pytest configuration and fixtures for archlink tests.
"""

import pytest
from unittest.mock import Mock

from archlink.core.exceptions import SourceFetchError
from archlink.core.interfaces import ArchLinkConfig, Candidate, FetcherConfig, PackageSource
from archlink.fetcher.base import CandidateFetcher


@pytest.fixture
def fetcher_config():
    """Create a test fetcher configuration."""
    return FetcherConfig(
        request_timeout=5,  # Shorter timeout
        retry_count=0
    )


@pytest.fixture
def archlink_config():
    """Create a test runtime configuration."""
    return ArchLinkConfig(max_results=10, aur_helpers=["yay", "paru"])


@pytest.fixture
def official_candidates():
    """Candidates as the official repos would return them."""
    return [
        Candidate("firefox", "131.0-1", "Fast, Private & Safe Web Browser", PackageSource.OFFICIAL),
        Candidate("firefox-i18n-de", "131.0-1", "German language pack for Firefox", PackageSource.OFFICIAL),
    ]


@pytest.fixture
def aur_candidates():
    """Candidates as the AUR would return them."""
    return [
        Candidate("firefox-nightly", "133.0a1-1", "Standalone Web Browser from Mozilla - Nightly build",
                  PackageSource.AUR),
        Candidate("firefox", "131.0-1", "Firefox built from source", PackageSource.AUR),
    ]


def make_fetcher(name, source, candidates=None, error=None):
    """Create a mock fetcher that returns candidates or raises error."""
    fetcher = Mock(spec=CandidateFetcher)
    fetcher.source = source
    fetcher.get_repository_name.return_value = name
    if error is not None:
        fetcher.search_packages.side_effect = error
    else:
        fetcher.search_packages.return_value = list(candidates or [])
    return fetcher


@pytest.fixture
def official_fetcher(official_candidates):
    return make_fetcher("official repos", PackageSource.OFFICIAL, official_candidates)


@pytest.fixture
def aur_fetcher(aur_candidates):
    return make_fetcher("AUR", PackageSource.AUR, aur_candidates)


@pytest.fixture
def failing_official_fetcher():
    return make_fetcher(
        "official repos", PackageSource.OFFICIAL,
        error=SourceFetchError("official repos", "connection refused")
    )


@pytest.fixture
def failing_aur_fetcher():
    return make_fetcher("AUR", PackageSource.AUR, error=SourceFetchError("AUR", "Too many package results."))
