"""Core components for archlink."""

from .configuration import ConfigurationManager
from .system_dependency_checker import SystemDependencyChecker
from .interfaces import (
    ArchLinkConfig,
    Candidate,
    FetcherConfig,
    InstallerSpec,
    InstallResult,
    PackageSource,
    NO_DESCRIPTION
)
from .exceptions import (
    ArchLinkError,
    SourceFetchError,
    EmptyResultError,
    InputValidationError,
    InstallAttemptFailure,
    InstallExhaustionError,
    ConfigurationError
)

__all__ = [
    "ConfigurationManager",
    "SystemDependencyChecker",
    "ArchLinkConfig",
    "Candidate",
    "FetcherConfig",
    "InstallerSpec",
    "InstallResult",
    "PackageSource",
    "NO_DESCRIPTION",
    "ArchLinkError",
    "SourceFetchError",
    "EmptyResultError",
    "InputValidationError",
    "InstallAttemptFailure",
    "InstallExhaustionError",
    "ConfigurationError"
]
