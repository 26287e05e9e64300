"""
Core interfaces for archlink.

This module contains the data models shared by the fetchers, the search
pipeline and the install orchestrator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


NO_DESCRIPTION = "No description available"


class PackageSource(str, Enum):
    """
    Catalog a candidate originated from.
    """
    OFFICIAL = "official"
    AUR = "aur"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Candidate:
    """
    A package discovered in one of the catalogs.

    Candidates are value objects: they are never mutated once a fetcher has
    produced them.
    """
    name: str
    version: str = ""
    description: str = NO_DESCRIPTION
    source: Union[PackageSource, str] = PackageSource.UNKNOWN

    def __post_init__(self):
        name = (self.name or "").strip()
        if not name:
            raise ValueError("Candidate name must not be empty")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "version", self.version or "")
        object.__setattr__(self, "description", self.description or NO_DESCRIPTION)
        object.__setattr__(self, "source", PackageSource(self.source))


@dataclass
class FetcherConfig:
    """
    Configuration for candidate fetchers.
    """
    request_timeout: int = 10
    retry_count: int = 0
    user_agent: str = "archlink"


@dataclass
class ArchLinkConfig:
    """
    Runtime configuration read once at process start.
    """
    max_results: int = 10
    request_timeout: int = 10
    aur_helpers: List[str] = field(default_factory=lambda: ["yay", "paru"])
    noconfirm: bool = True

    def fetcher_config(self) -> FetcherConfig:
        return FetcherConfig(request_timeout=self.request_timeout)


@dataclass
class InstallerSpec:
    """
    One installer program the orchestrator may try.
    """
    name: str
    args: List[str] = field(default_factory=lambda: ["-S"])
    elevate: bool = False
    probe: bool = True


@dataclass
class InstallResult:
    """
    Outcome of a successful install.
    """
    package: str
    installer: str
    attempted: List[str] = field(default_factory=list)
    source: Optional[PackageSource] = None
