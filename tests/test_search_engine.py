"""
Tests for the package search engine.
"""

import unittest
from unittest.mock import patch

from archlink.core.exceptions import EmptyResultError, InputValidationError, SourceFetchError
from archlink.core.interfaces import ArchLinkConfig, Candidate, PackageSource
from archlink.fetcher.aur import AurFetcher
from archlink.fetcher.official import OfficialRepoFetcher
from archlink.search.engine import PackageSearchEngine
from tests.conftest import make_fetcher


class TestPackageSearchEngine(unittest.TestCase):
    """Test the PackageSearchEngine class."""

    def setUp(self):
        """Set up test fixtures."""
        self.official = make_fetcher("official repos", PackageSource.OFFICIAL, [
            Candidate("firefox", "131.0-1", "Fast, Private & Safe Web Browser", PackageSource.OFFICIAL),
            Candidate("firefox-i18n-de", "131.0-1", "German language pack", PackageSource.OFFICIAL),
        ])
        self.aur = make_fetcher("AUR", PackageSource.AUR, [
            Candidate("firefox-nightly", "133.0a1-1", "Nightly build", PackageSource.AUR),
            Candidate("firefox", "131.0-1", "Built from source", PackageSource.AUR),
        ])

    def test_default_fetchers(self):
        engine = PackageSearchEngine()
        kinds = [type(f) for f in engine.aggregator.fetchers]
        self.assertEqual(kinds, [OfficialRepoFetcher, AurFetcher])

    def test_search_ranks_and_limits(self):
        engine = PackageSearchEngine(ArchLinkConfig(max_results=2), fetchers=[self.official, self.aur])

        results = engine.search("firefox")

        self.assertEqual(len(results), 2)
        self.assertEqual([(c.name, c.source) for c in results], [
            ("firefox", PackageSource.OFFICIAL),
            ("firefox", PackageSource.AUR),
        ])

    def test_explicit_limit_overrides_config(self):
        engine = PackageSearchEngine(ArchLinkConfig(max_results=1), fetchers=[self.official, self.aur])
        self.assertEqual(len(engine.search("firefox", limit=3)), 3)

    def test_query_is_trimmed(self):
        engine = PackageSearchEngine(fetchers=[self.official])
        engine.search("  firefox  ")
        self.official.search_packages.assert_called_once_with("firefox")

    def test_empty_query_rejected(self):
        engine = PackageSearchEngine(fetchers=[self.official])
        with self.assertRaises(InputValidationError):
            engine.search("   ")
        self.official.search_packages.assert_not_called()

    def test_no_results_raises_empty_result(self):
        empty = make_fetcher("AUR", PackageSource.AUR, [])
        engine = PackageSearchEngine(fetchers=[empty])
        with self.assertRaises(EmptyResultError) as ctx:
            engine.search("doesnotexist")
        self.assertEqual(ctx.exception.query, "doesnotexist")

    def test_all_sources_failing_is_empty_result(self):
        failing = [
            make_fetcher("official repos", PackageSource.OFFICIAL, error=SourceFetchError("official repos", "down")),
            make_fetcher("AUR", PackageSource.AUR, error=SourceFetchError("AUR", "down")),
        ]
        warnings = []
        engine = PackageSearchEngine(fetchers=failing, warning_handler=warnings.append)

        with self.assertRaises(EmptyResultError):
            engine.search("firefox")
        self.assertEqual(len(warnings), 2)

    def test_default_fetchers_use_configured_timeout(self):
        with patch("archlink.search.engine.AurFetcher") as aur_cls, \
                patch("archlink.search.engine.OfficialRepoFetcher") as official_cls:
            PackageSearchEngine(ArchLinkConfig(request_timeout=4))
        self.assertEqual(aur_cls.call_args.kwargs["config"].request_timeout, 4)
        self.assertEqual(official_cls.call_args.kwargs["config"].request_timeout, 4)


if __name__ == "__main__":
    unittest.main()
