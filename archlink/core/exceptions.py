"""
Exceptions for archlink.

This module contains the exception hierarchy for archlink operations.
"""

from typing import List, Optional


class ArchLinkError(Exception):
    """Base exception for archlink operations."""
    pass


class SourceFetchError(ArchLinkError):
    """Raised when one catalog cannot be queried or its response parsed."""

    def __init__(self, source: str, message: str):
        super().__init__(message)
        self.source = source
        self.message = message


class EmptyResultError(ArchLinkError):
    """Raised when a search produced no candidates at all."""

    def __init__(self, query: str):
        super().__init__(f"No packages found for '{query}'. Try refining your query.")
        self.query = query


class InputValidationError(ArchLinkError):
    """Raised when a query or package name is empty."""
    pass


class InstallAttemptFailure(ArchLinkError):
    """Raised when a single installer invocation fails."""

    def __init__(self, installer: str, returncode: Optional[int] = None, reason: Optional[str] = None):
        if reason is None:
            reason = f"exited with status {returncode}"
        super().__init__(f"{installer} {reason}")
        self.installer = installer
        self.returncode = returncode


class InstallExhaustionError(ArchLinkError):
    """Raised when every installer attempt has failed."""

    def __init__(self, package: str, attempted: List[str]):
        self.package = package
        self.attempted = list(attempted)
        attempted_text = ", ".join(self.attempted) if self.attempted else "none"
        super().__init__(
            f"Failed to install '{package}'. Attempted: {attempted_text}. "
            f"Install yay/paru or check package name."
        )


class ConfigurationError(ArchLinkError):
    """Raised when configuration is invalid."""
    pass
