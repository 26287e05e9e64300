"""
Official repository fetchers for archlink.

This module provides functionality to search the official Arch Linux
repositories, either through the archlinux.org package search API or, as a
local fallback, through the host's ``pacman -Ss`` output.
"""

import logging
import re
import subprocess
from typing import List, Optional

from archlink.core.exceptions import SourceFetchError
from archlink.core.interfaces import Candidate, FetcherConfig, PackageSource
from archlink.core.system_dependency_checker import SystemDependencyChecker
from archlink.fetcher.base import CandidateFetcher, HttpCandidateFetcher, collapse_duplicates


logger = logging.getLogger(__name__)


ARCH_WEB_BASE_URL = "https://archlinux.org"

# ``repo/name version [rest]``; the repo prefix is optional
_HEADER_RE = re.compile(r'^(?:(?P<repo>[^/\s]+)/)?(?P<name>\S+)\s+(?P<version>\S+)(?:\s+(?P<rest>.*))?$')
# Group lists and install markers pacman appends to the header line
_HEADER_MARKERS_RE = re.compile(r'\((?:[^)]*)\)|\[installed[^\]]*\]')


class ArchWebFetcher(HttpCandidateFetcher):
    """
    Fetcher for the archlinux.org package search API.

    The endpoint returns one record per (repository, architecture) pair, so
    the same package name can appear several times; those collapse into one
    candidate.
    """

    source = PackageSource.OFFICIAL

    def __init__(self, config: Optional[FetcherConfig] = None, base_url: str = ARCH_WEB_BASE_URL):
        super().__init__(base_url=base_url, config=config)

    def get_repository_name(self) -> str:
        return "official repos"

    def search_packages(self, query: str) -> List[Candidate]:
        data = self._fetch_json("packages/search/json/", params={"q": query})

        if isinstance(data, dict):
            results = data.get("results")
        else:
            # Some mirrors of the API return the bare array
            results = data

        if not isinstance(results, list):
            raise SourceFetchError(self.get_repository_name(), "unexpected response: missing 'results' array")

        candidates = []
        for record in results:
            if not isinstance(record, dict):
                continue
            candidate = self._make_candidate(
                record.get("pkgname"),
                self._format_version(record.get("pkgver"), record.get("pkgrel")),
                record.get("pkgdesc")
            )
            if candidate is not None:
                candidates.append(candidate)

        logger.debug(f"archlinux.org returned {len(candidates)} records for '{query}'")
        return collapse_duplicates(candidates)

    @staticmethod
    def _format_version(pkgver: Optional[str], pkgrel: Optional[str]) -> str:
        """
        Join the upstream version and the package release as ``pkgver-pkgrel``.
        """
        parts = [str(p) for p in (pkgver, pkgrel) if p not in (None, "")]
        return "-".join(parts)


class PacmanLocalFetcher(CandidateFetcher):
    """
    Fetcher backed by the host's package database (``pacman -Ss``).
    """

    source = PackageSource.OFFICIAL

    def __init__(
        self,
        config: Optional[FetcherConfig] = None,
        dependency_checker: Optional[SystemDependencyChecker] = None,
        command_timeout: int = 30
    ):
        """
        Initialize the local fetcher.

        Args:
            config: Configuration for the fetcher.
            dependency_checker: Checker used to probe for pacman.
            command_timeout: Timeout in seconds for the pacman invocation.
        """
        super().__init__(config)
        self.dependency_checker = dependency_checker or SystemDependencyChecker()
        self.command_timeout = command_timeout

    def get_repository_name(self) -> str:
        return "local package database"

    def search_packages(self, query: str) -> List[Candidate]:
        name = self.get_repository_name()

        if not self.dependency_checker.check_command_availability("pacman"):
            self.dependency_checker.log_missing_dependency("pacman", "local search")
            raise SourceFetchError(name, "pacman command not found")

        command = ["pacman", "-Ss", query]
        try:
            logger.debug(f"Executing command: {' '.join(command)}")
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.command_timeout,
                check=False
            )
        except subprocess.TimeoutExpired as e:
            raise SourceFetchError(name, f"pacman -Ss timed out after {self.command_timeout} seconds") from e
        except (subprocess.SubprocessError, OSError) as e:
            raise SourceFetchError(name, f"failed to execute pacman: {e}") from e

        # pacman -Ss exits 1 with no output at all when nothing matches
        if result.returncode == 1 and not result.stdout.strip() and not result.stderr.strip():
            return []
        if result.returncode != 0:
            raise SourceFetchError(
                name, f"pacman -Ss exited with status {result.returncode}: {result.stderr.strip()}"
            )

        return collapse_duplicates(self.parse_search_output(result.stdout))

    def parse_search_output(self, output: str) -> List[Candidate]:
        """
        Parse ``pacman -Ss`` output.

        A non-indented line starts a record (``repo/name version rest``) and
        any indented lines that follow continue its description.

        Args:
            output: Raw command output.

        Returns:
            Candidates in output order.
        """
        candidates = []
        current = None

        for line in output.splitlines():
            if not line.strip():
                continue

            if line[0].isspace():
                if current is not None:
                    current["description"].append(line.strip())
                continue

            if current is not None:
                candidates.append(self._finish_record(current))
                current = None

            match = _HEADER_RE.match(line.strip())
            if not match:
                logger.debug(f"Skipping unparseable pacman line: {line!r}")
                continue

            rest = _HEADER_MARKERS_RE.sub("", match.group("rest") or "").strip()
            current = {
                "name": match.group("name"),
                "version": match.group("version"),
                "description": [rest] if rest else []
            }

        if current is not None:
            candidates.append(self._finish_record(current))

        return [c for c in candidates if c is not None]

    def _finish_record(self, record) -> Optional[Candidate]:
        return self._make_candidate(record["name"], record["version"], " ".join(record["description"]))


class OfficialRepoFetcher(CandidateFetcher):
    """
    Official repository fetcher that prefers the web API and falls back to
    the local package database.
    """

    source = PackageSource.OFFICIAL

    def __init__(
        self,
        config: Optional[FetcherConfig] = None,
        web_fetcher: Optional[ArchWebFetcher] = None,
        local_fetcher: Optional[PacmanLocalFetcher] = None
    ):
        super().__init__(config)
        self.web_fetcher = web_fetcher or ArchWebFetcher(config=self.config)
        self.local_fetcher = local_fetcher or PacmanLocalFetcher(config=self.config)

    def get_repository_name(self) -> str:
        return "official repos"

    def search_packages(self, query: str) -> List[Candidate]:
        try:
            return self.web_fetcher.search_packages(query)
        except SourceFetchError as web_error:
            logger.info(f"Web search failed ({web_error}), falling back to pacman -Ss")
            try:
                return self.local_fetcher.search_packages(query)
            except SourceFetchError as local_error:
                raise SourceFetchError(
                    self.get_repository_name(),
                    f"{web_error}; local fallback also failed: {local_error}"
                ) from local_error
