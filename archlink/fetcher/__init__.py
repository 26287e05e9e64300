"""
Candidate fetcher module for archlink.

This module provides functionality to search the official Arch Linux
repositories and the AUR for packages.
"""

from archlink.fetcher.base import (
    CandidateFetcher, HttpCandidateFetcher, collapse_duplicates
)
from archlink.fetcher.official import ArchWebFetcher, OfficialRepoFetcher, PacmanLocalFetcher
from archlink.fetcher.aur import AurFetcher

__all__ = [
    "CandidateFetcher",
    "HttpCandidateFetcher",
    "collapse_duplicates",
    "ArchWebFetcher",
    "OfficialRepoFetcher",
    "PacmanLocalFetcher",
    "AurFetcher"
]
