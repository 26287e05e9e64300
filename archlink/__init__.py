"""
ArchLink - find and install Arch Linux packages.

This package searches the official Arch Linux repositories and the AUR
concurrently, ranks the merged results by name similarity, and installs the
chosen package through pacman or an AUR helper.
"""

__version__ = "0.1.1"

from .core.exceptions import (
    ArchLinkError, SourceFetchError, InputValidationError, InstallExhaustionError
)
from .core.interfaces import Candidate, PackageSource
from .search.engine import PackageSearchEngine
from .installer.orchestrator import InstallOrchestrator

__all__ = [
    "Candidate",
    "PackageSource",
    "PackageSearchEngine",
    "InstallOrchestrator",
    "ArchLinkError",
    "SourceFetchError",
    "InputValidationError",
    "InstallExhaustionError"
]
