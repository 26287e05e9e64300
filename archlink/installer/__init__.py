"""Package installation through pacman and AUR helpers."""

from .orchestrator import InstallOrchestrator, PRIMARY_INSTALLER

__all__ = [
    "InstallOrchestrator",
    "PRIMARY_INSTALLER"
]
