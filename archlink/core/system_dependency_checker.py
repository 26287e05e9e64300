"""
System dependency checker for archlink.

This module provides functionality to check for installer programs and
package-database tools on the host and to report missing ones consistently.
"""

import logging
import shutil
from typing import Dict, Set


logger = logging.getLogger(__name__)


class SystemDependencyChecker:
    """
    Checker for system commands.

    The check is a lightweight existence probe on ``PATH``; it never runs the
    command to verify its version or capabilities.
    """

    # Installation instructions for the commands archlink relies on
    INSTALLATION_INSTRUCTIONS = {
        "pacman": "pacman is typically pre-installed on Arch Linux systems",
        "sudo": "Install sudo with: pacman -S sudo (as root)",
        "yay": "Install yay from the AUR: https://aur.archlinux.org/packages/yay",
        "paru": "Install paru from the AUR: https://aur.archlinux.org/packages/paru",
    }

    def __init__(self):
        """Initialize the system dependency checker."""
        self._checked_commands: Dict[str, bool] = {}
        self._logged_dependencies: Set[str] = set()

    def check_command_availability(self, command: str) -> bool:
        """
        Check if a system command is available.

        Args:
            command: Name of the command to check.

        Returns:
            True if the command is available, False otherwise.
        """
        if command in self._checked_commands:
            return self._checked_commands[command]

        available = shutil.which(command) is not None
        self._checked_commands[command] = available

        logger.debug(f"Command '{command}' availability: {available}")
        return available

    def get_installation_instructions(self, command: str) -> str:
        """
        Get installation instructions for a command.

        Args:
            command: Name of the command to get instructions for.

        Returns:
            Installation instructions for the command.
        """
        return self.INSTALLATION_INSTRUCTIONS.get(
            command,
            f"Installation instructions for '{command}' are not available. "
            f"Please consult the official documentation."
        )

    def log_missing_dependency(self, command: str, component: str) -> None:
        """
        Log a missing dependency once per command and component.

        Args:
            command: Name of the missing command.
            component: Name of the component that wanted the command.
        """
        log_key = f"{command}:{component}"
        if log_key in self._logged_dependencies:
            return

        self._logged_dependencies.add(log_key)

        logger.debug(
            f"'{command}' command not found, skipping it for {component}. "
            f"{self.get_installation_instructions(command)}"
        )
