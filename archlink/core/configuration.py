"""
Configuration management for archlink.

This module provides the ConfigurationManager class for loading the archlink
configuration file. A missing or malformed file never aborts the program:
every problem degrades to the built-in defaults.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from archlink.core.exceptions import ConfigurationError
from archlink.core.interfaces import ArchLinkConfig


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "/etc/archlink/config.yaml"
CONFIG_ENV_VAR = "ARCHLINK_CONFIG"


class ConfigurationManager:
    """
    Loads archlink configuration from a YAML file.

    The configuration path is resolved from, in order: the explicit
    ``config_path`` argument, the ``ARCHLINK_CONFIG`` environment variable,
    and ``/etc/archlink/config.yaml``.

    Only YAML is read. A TOML file such as ``/etc/archlink/config.toml`` is
    not picked up; its settings have to be moved to ``config.yaml``.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, the
                environment variable or the system-wide default is used.
        """
        if config_path is None:
            config_path = os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        self.config_path = Path(config_path).expanduser()
        self._config_cache: Optional[ArchLinkConfig] = None

        logger.debug(f"ConfigurationManager initialized with config_path: {self.config_path}")

    def load(self) -> ArchLinkConfig:
        """
        Load the configuration, falling back to defaults on any error.

        Returns:
            The loaded configuration.
        """
        if self._config_cache is not None:
            return self._config_cache

        if not self.config_path.exists():
            legacy_path = self.config_path.with_suffix(".toml")
            if legacy_path.exists():
                logger.warning(
                    f"Found {legacy_path}, but only YAML configuration is read. "
                    f"Move its settings to {self.config_path}. Using default configuration."
                )
            else:
                logger.debug(f"No configuration file at {self.config_path}, using defaults")
            self._config_cache = ArchLinkConfig()
            return self._config_cache

        try:
            raw_data = self._read_config_file()
        except ConfigurationError as e:
            logger.warning(f"{e}. Using default configuration.")
            self._config_cache = ArchLinkConfig()
            return self._config_cache

        self._config_cache = self._build_config(raw_data)
        return self._config_cache

    def _read_config_file(self) -> Dict[str, Any]:
        """
        Read and parse the configuration file.

        Raises:
            ConfigurationError: If the file cannot be read or is not a YAML mapping.
        """
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                raw_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid config file format: {e}")
        except (IOError, OSError) as e:
            raise ConfigurationError(f"Failed to read config file: {e}")

        if raw_data is None:
            return {}
        if not isinstance(raw_data, dict):
            raise ConfigurationError(
                f"Invalid config file format: expected a mapping, got {type(raw_data).__name__}"
            )
        return raw_data

    def _build_config(self, raw_data: Dict[str, Any]) -> ArchLinkConfig:
        """
        Build a configuration from raw data, validating each key independently.

        Args:
            raw_data: Parsed YAML mapping.

        Returns:
            Configuration with invalid values replaced by defaults.
        """
        defaults = ArchLinkConfig()
        config = ArchLinkConfig()

        known_keys = {"max_results", "request_timeout", "aur_helpers", "noconfirm"}
        for key in raw_data:
            if key not in known_keys:
                logger.debug(f"Ignoring unknown configuration key: {key}")

        if "max_results" in raw_data:
            config.max_results = self._positive_int(
                raw_data["max_results"], "max_results", defaults.max_results
            )

        if "request_timeout" in raw_data:
            config.request_timeout = self._positive_int(
                raw_data["request_timeout"], "request_timeout", defaults.request_timeout
            )

        if "aur_helpers" in raw_data:
            helpers = raw_data["aur_helpers"]
            if (isinstance(helpers, list)
                    and all(isinstance(h, str) and h.strip() for h in helpers)):
                config.aur_helpers = [h.strip() for h in helpers]
            else:
                logger.warning(
                    f"Invalid value for aur_helpers: {helpers!r}. Using default {defaults.aur_helpers}."
                )

        if "noconfirm" in raw_data:
            noconfirm = raw_data["noconfirm"]
            if isinstance(noconfirm, bool):
                config.noconfirm = noconfirm
            else:
                logger.warning(f"Invalid value for noconfirm: {noconfirm!r}. Using default {defaults.noconfirm}.")

        logger.debug(f"Loaded configuration from {self.config_path}: {config}")
        return config

    @staticmethod
    def _positive_int(value: Any, key: str, default: int) -> int:
        # bool is an int subclass; ``max_results: true`` is not a count
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            logger.warning(f"Invalid value for {key}: {value!r}. Using default {default}.")
            return default
        return value
