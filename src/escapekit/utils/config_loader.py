"""
Configuration loader for EscapeKit.

This module provides functionality for loading and managing
configuration settings.

"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from xdg.BaseDirectory import xdg_config_home

from escapekit.config import DEFAULT_CONFIG
from escapekit.escape import EscapeStyle, ScriptFlags, StyleKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Constant for minimum number of parts in environment variable
MIN_ENV_VAR_PARTS = 2

ENV_PREFIX = "ESCAPEKIT_"

# Type for configuration values
ConfigValue = str | int | float | bool | dict[str, Any] | list[Any] | None


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigLoader:
	"""
	Loads and manages configuration for EscapeKit.

	This class handles loading configuration from files, environment
	variables, and default values, with proper error handling and path
	resolution.

	"""

	def __init__(
		self,
		config_file: str | Path | None = None,
		*,
		search: bool = True,
		apply_env: bool = True,
	) -> None:
		"""
		Initialize the configuration loader.

		Args:
		        config_file: Path to configuration file (optional)
		        search: Look in the standard locations when no file is given
		        apply_env: Apply ESCAPEKIT_* environment overrides

		"""
		self.config: dict[str, Any] = {}
		self.apply_env = apply_env
		self.config_file = self._resolve_config_file(config_file) if config_file or search else None
		self.load_config()

	def _resolve_config_file(self, config_file: str | Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.escapekit.yml in the current directory
		2. $XDG_CONFIG_HOME/escapekit/config.yml
		3. ~/.escapekit/config.yml

		Args:
		        config_file: Explicitly provided config file path (optional)

		Returns:
		        Optional[Path]: Resolved config file path or None if no suitable file found

		"""
		if config_file:
			path = Path(config_file).expanduser().resolve()
			if not path.exists():
				logger.warning("Specified config file not found: %s", path)
			return path

		local_config = Path(".escapekit.yml")
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "escapekit" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		legacy_config = Path.home() / ".escapekit" / "config.yml"
		if legacy_config.exists():
			return legacy_config

		return None

	def load_config(self) -> dict[str, Any]:
		"""
		Load configuration from file and apply environment variable overrides.

		Returns:
		        Dict[str, Any]: Loaded configuration

		Raises:
		        ConfigError: If configuration file exists but cannot be loaded

		"""
		self.config = copy.deepcopy(DEFAULT_CONFIG)

		if self.config_file and self.config_file.exists():
			try:
				with self.config_file.open(encoding="utf-8") as f:
					file_config = yaml.safe_load(f)
			except (OSError, yaml.YAMLError) as e:
				error_msg = f"Error loading configuration from {self.config_file}: {e}"
				logger.debug(error_msg, exc_info=True)
				raise ConfigError(error_msg) from e

			if file_config is not None and not isinstance(file_config, dict):
				error_msg = f"Configuration in {self.config_file} must be a mapping"
				raise ConfigError(error_msg)
			if file_config:
				self._merge_configs(self.config, file_config)
			logger.info("Loaded configuration from %s", self.config_file)

		if self.apply_env:
			self._apply_env_overrides()

		return self.config

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""
		Recursively merge two configuration dictionaries.

		Args:
		        base: Base configuration dictionary to merge into
		        override: Override configuration to apply

		"""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	def _apply_env_overrides(self) -> None:
		"""Apply environment variable overrides to configuration."""
		# Look for environment variables in the form ESCAPEKIT_SECTION_KEY
		for env_var, value in os.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = env_var.lower().split("_")[1:]
			if len(parts) < MIN_ENV_VAR_PARTS:
				continue
			section, key = parts[0], "_".join(parts[1:])

			typed_value: ConfigValue
			if value.lower() in ("true", "yes", "1"):
				typed_value = True
			elif value.lower() in ("false", "no", "0"):
				typed_value = False
			else:
				typed_value = value

			if not isinstance(self.config.get(section), dict):
				self.config[section] = {}
			self.config[section][key] = typed_value
			logger.debug("Applied environment override %s: %s", env_var, typed_value)

	def get(self, key: str, default: T = None) -> T:
		"""
		Get a configuration value, optionally with a section.

		Examples:
		        # Get a top-level key
		        config.get("escape")

		        # Get a nested key with dot notation
		        config.get("escape.style")

		Args:
		        key: Configuration key, can include dots for nested access
		        default: Default value if key not found

		Returns:
		        T: Configuration value or default

		"""
		current = self.config
		for part in key.split("."):
			if isinstance(current, dict) and part in current:
				current = current[part]
			else:
				return default

		return cast("T", current)

	def set(self, key: str, value: ConfigValue) -> None:
		"""
		Set a configuration value.

		Args:
		        key: Configuration key, can include dots for nested access
		        value: Value to set

		"""
		parts = key.split(".")
		current = self.config
		for part in parts[:-1]:
			if not isinstance(current.get(part), dict):
				current[part] = {}
			current = current[part]

		current[parts[-1]] = value

	def save(self, config_file: str | Path | None = None) -> None:
		"""
		Save the current configuration to a file.

		Args:
		        config_file: Path to save configuration to (optional, defaults to current config_file)

		Raises:
		        ConfigError: If configuration cannot be saved

		"""
		save_path = Path(config_file) if config_file else self.config_file

		if not save_path:
			error_msg = "No configuration file specified for saving"
			logger.error(error_msg)
			raise ConfigError(error_msg)

		try:
			save_path.parent.mkdir(parents=True, exist_ok=True)
			with save_path.open("w", encoding="utf-8") as f:
				yaml.safe_dump(self.config, f, default_flow_style=False)
			logger.info("Configuration saved to %s", save_path)
		except OSError as e:
			error_msg = f"Error saving configuration to {save_path}: {e}"
			logger.exception(error_msg)
			raise ConfigError(error_msg) from e

	def get_script_flags(self, section: str = "escape") -> ScriptFlags:
		"""
		Get the script flags configured for a section.

		Returns:
		        ScriptFlags: Configured flags

		Raises:
		        ConfigError: If a flag is not a boolean

		"""
		values: dict[str, bool] = {}
		for name in ScriptFlags.names():
			value = self.get(f"{section}.{name}", False)
			if not isinstance(value, bool):
				error_msg = f"{section}.{name} must be a boolean, got {value!r}"
				raise ConfigError(error_msg)
			values[name] = value
		return ScriptFlags(**values)

	def get_style(self, section: str = "escape") -> EscapeStyle:
		"""
		Get the default escape style for a section.

		Script flags are only read for the escape section and only applied to
		the script style.

		Returns:
		        EscapeStyle: Configured style

		Raises:
		        ConfigError: If the style name or a flag is invalid

		"""
		name = self.get(f"{section}.style", "script")
		if not isinstance(name, str):
			error_msg = f"{section}.style must be a string, got {name!r}"
			raise ConfigError(error_msg)

		try:
			style = EscapeStyle.from_name(name)
		except ValueError as e:
			error_msg = f"{section}.style: {e}"
			raise ConfigError(error_msg) from e

		if section == "escape" and style.kind is StyleKind.SCRIPT:
			style = EscapeStyle(style.kind, self.get_script_flags(section))
		return style
