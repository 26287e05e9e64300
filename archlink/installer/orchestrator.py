"""
Install orchestration for archlink.

This module installs a package by trying pacman and then a list of AUR
helpers in priority order until one of them succeeds.
"""

import logging
import os
import subprocess
from typing import Callable, List, Optional, Union

from archlink.core.exceptions import (
    InputValidationError, InstallAttemptFailure, InstallExhaustionError
)
from archlink.core.interfaces import (
    ArchLinkConfig, InstallerSpec, InstallResult, PackageSource
)
from archlink.core.system_dependency_checker import SystemDependencyChecker


logger = logging.getLogger(__name__)


Reporter = Callable[[str], None]

PRIMARY_INSTALLER = InstallerSpec(name="pacman", args=["-S"], elevate=True, probe=False)


class InstallOrchestrator:
    """
    Installs a package through the first installer that succeeds.

    The primary manager (pacman) is tried only for official or unknown
    packages. AUR helpers are tried afterwards regardless of source, so a
    package searched as official but actually living in the AUR can still be
    installed. Installers with ``probe`` set are looked up on PATH first and
    skipped when missing; only installers that were actually invoked are
    reported as attempted.

    Installer processes inherit the terminal: password and confirmation
    prompts reach the operator directly, and nothing is captured.
    """

    def __init__(
        self,
        config: Optional[ArchLinkConfig] = None,
        dependency_checker: Optional[SystemDependencyChecker] = None,
        reporter: Optional[Reporter] = None
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Runtime configuration; supplies the helper order and noconfirm.
            dependency_checker: Checker used to probe for AUR helpers.
            reporter: Receives human-readable progress lines. Defaults to logging.
        """
        self.config = config or ArchLinkConfig()
        self.dependency_checker = dependency_checker or SystemDependencyChecker()
        self.reporter = reporter or logger.info

    def get_fallback_installers(self) -> List[InstallerSpec]:
        """
        AUR helpers in priority order.
        """
        return [InstallerSpec(name=helper, args=["-S"]) for helper in self.config.aur_helpers]

    def get_installer_chain(self, source: PackageSource) -> List[InstallerSpec]:
        """
        Installers to try for a package from the given source, in order.

        pacman only serves official packages, so it is left out for AUR ones.
        """
        chain = []
        if source in (PackageSource.OFFICIAL, PackageSource.UNKNOWN):
            chain.append(PRIMARY_INSTALLER)
        chain.extend(self.get_fallback_installers())
        return chain

    def install(self, package_name: str, source: Union[PackageSource, str] = PackageSource.UNKNOWN) -> InstallResult:
        """
        Install a package.

        Args:
            package_name: Exact package name.
            source: Catalog the package was found in.

        Returns:
            InstallResult naming the installer that succeeded.

        Raises:
            InputValidationError: If the package name is empty.
            InstallExhaustionError: If every attempted installer failed.
        """
        package_name = (package_name or "").strip()
        if not package_name:
            raise InputValidationError("Package name cannot be empty.")
        source = PackageSource(source)

        attempted: List[str] = []

        for installer in self.get_installer_chain(source):
            if installer.probe and not self.dependency_checker.check_command_availability(installer.name):
                self.dependency_checker.log_missing_dependency(installer.name, "install")
                continue
            if self._try_installer(installer, package_name, attempted):
                return InstallResult(package_name, installer.name, attempted, source)

        raise InstallExhaustionError(package_name, attempted)

    def build_command(self, installer: InstallerSpec, package_name: str) -> List[str]:
        """
        Build the argument vector for one installer invocation.
        """
        command = [installer.name] + list(installer.args) + [package_name]
        if self.config.noconfirm:
            command.append("--noconfirm")
        if installer.elevate and not self._is_root():
            command.insert(0, "sudo")
        return command

    def _try_installer(self, installer: InstallerSpec, package_name: str, attempted: List[str]) -> bool:
        """
        Run one installer and record it as attempted.

        Returns:
            True if the installer reported success.
        """
        command = self.build_command(installer, package_name)
        attempted.append(installer.name)

        self.reporter(f"Trying '{' '.join(command)}'... (may prompt for password)")
        try:
            self._run(installer, command)
        except InstallAttemptFailure as e:
            logger.info(f"Install attempt failed: {e}")
            return False

        self.reporter(f"Successfully installed '{package_name}' with {installer.name}")
        return True

    def _run(self, installer: InstallerSpec, command: List[str]) -> None:
        """
        Spawn the installer with inherited stdio and wait for it.

        Raises:
            InstallAttemptFailure: If it cannot be spawned or exits non-zero.
        """
        logger.debug(f"Executing command: {' '.join(command)}")
        try:
            result = subprocess.run(command, check=False)
        except OSError as e:
            raise InstallAttemptFailure(installer.name, reason=f"could not be started: {e}") from e

        if result.returncode != 0:
            raise InstallAttemptFailure(installer.name, result.returncode)

    @staticmethod
    def _is_root() -> bool:
        geteuid = getattr(os, "geteuid", None)
        return geteuid is not None and geteuid() == 0
