"""Configuration file loading and management"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def xdgConfigHome_get() -> Path:
    """
    Resolve the per-user configuration directory

    Returns:
        $XDG_CONFIG_HOME if set and absolute, else ~/.config
    """
    xdg_config_home: str = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg_config_home and os.path.isabs(xdg_config_home):
        return Path(xdg_config_home)
    return Path("~/.config").expanduser()


@dataclass
class LegacyConfig:
    """GTK2 (X11 client message) pipeline settings"""
    enabled: bool
    display: Optional[str]
    message_type: str
    state_property: str


@dataclass
class ModernConfig:
    """GTK3/4 (xsettingsd) pipeline settings"""
    enabled: bool
    settings_file: Path
    section: str
    output_file: Path
    daemon: str
    regenerate: bool
    signal: bool


@dataclass
class LoggingConfig:
    """Logging configuration settings"""
    level: str
    file: Optional[str]
    format: str


@dataclass
class Config:
    """Complete application configuration"""
    legacy: LegacyConfig
    modern: ModernConfig
    logging: LoggingConfig


class ConfigLoader:
    """Loads and parses configuration from YAML files"""

    DEFAULT_CONFIG_PATHS = [
        "config.yml",
        "~/.config/themereload/config.yml",
        "/etc/themereload/config.yml",
    ]

    DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    @staticmethod
    def configFile_find() -> Optional[Path]:
        """
        Find configuration file in standard locations

        Returns:
            Path to config file, or None if not found
        """
        for config_path in ConfigLoader.DEFAULT_CONFIG_PATHS:
            path = Path(config_path).expanduser().resolve()
            if path.exists() and path.is_file():
                return path
        return None

    @staticmethod
    def yaml_load(file_path: Path) -> Dict[str, Any]:
        """
        Load YAML configuration file

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed configuration dictionary (empty for an empty file)

        Raises:
            FileNotFoundError: If file does not exist
            yaml.YAMLError: If file is not valid YAML
            ValueError: If the document is not a dictionary
        """
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a YAML dictionary")

        return data

    @staticmethod
    def section_get(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        """
        Get a top-level section, treating a missing or null section as empty

        Raises:
            ValueError: If the section is present but not a dictionary
        """
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{name}' must be a dictionary")
        return section

    @staticmethod
    def config_parse(data: Dict[str, Any]) -> Config:
        """
        Parse configuration dictionary into Config object

        Every key is optional; missing keys fall back to the defaults a
        login session needs (GTK 3 settings.ini, xsettingsd, $DISPLAY).

        Args:
            data: Raw configuration dictionary

        Returns:
            Parsed Config object

        Raises:
            ValueError: If a section is not a dictionary or the log level is unknown
        """
        config_home: Path = xdgConfigHome_get()

        # Parse legacy (GTK2) config
        legacy_data = ConfigLoader.section_get(data, "legacy")
        legacy = LegacyConfig(
            enabled=bool(legacy_data.get("enabled", True)),
            display=legacy_data.get("display"),
            message_type=legacy_data.get("message_type", "_GTK_READ_RCFILES"),
            state_property=legacy_data.get("state_property", "WM_STATE"),
        )

        # Parse modern (GTK3/4) config
        modern_data = ConfigLoader.section_get(data, "modern")
        settings_file = modern_data.get("settings_file")
        output_file = modern_data.get("output_file")
        modern = ModernConfig(
            enabled=bool(modern_data.get("enabled", True)),
            settings_file=(
                Path(settings_file).expanduser()
                if settings_file
                else config_home / "gtk-3.0" / "settings.ini"
            ),
            section=modern_data.get("section", "Settings"),
            output_file=(
                Path(output_file).expanduser()
                if output_file
                else config_home / "xsettingsd" / "xsettingsd.conf"
            ),
            daemon=modern_data.get("daemon", "xsettingsd"),
            regenerate=bool(modern_data.get("regenerate", True)),
            signal=bool(modern_data.get("signal", True)),
        )

        # Parse logging config
        logging_data = ConfigLoader.section_get(data, "logging")
        level = str(logging_data.get("level", "WARNING")).upper()
        if level not in ConfigLoader.LOG_LEVELS:
            raise ValueError(f"Unknown log level '{level}', expected one of {ConfigLoader.LOG_LEVELS}")
        logging = LoggingConfig(
            level=level,
            file=logging_data.get("file"),
            format=logging_data.get("format", ConfigLoader.DEFAULT_LOG_FORMAT),
        )

        return Config(
            legacy=legacy,
            modern=modern,
            logging=logging,
        )

    @staticmethod
    def config_load(file_path: Optional[Path] = None) -> Config:
        """
        Load configuration from file

        Args:
            file_path: Optional path to config file. If None, searches standard
                locations and falls back to built-in defaults when none exists.

        Returns:
            Parsed Config object

        Raises:
            FileNotFoundError: If an explicit config file does not exist
            ValueError: If config file is invalid
        """
        if file_path is None:
            file_path = ConfigLoader.configFile_find()
            if file_path is None:
                return ConfigLoader.config_parse({})

        data = ConfigLoader.yaml_load(file_path)
        return ConfigLoader.config_parse(data)

    @staticmethod
    def configWithOverrides_load(
        file_path: Optional[Path] = None,
        **overrides: Any
    ) -> Config:
        """
        Load configuration and apply command-line overrides

        Args:
            file_path: Optional path to config file
            **overrides: Key-value pairs to override config values; None
                means "not given on the command line"

        Returns:
            Config object with overrides applied

        Example:
            config = ConfigLoader.configWithOverrides_load(
                display=":1",
                regenerate=False
            )
        """
        config = ConfigLoader.config_load(file_path)

        # Apply overrides to legacy config
        if overrides.get("display") is not None:
            config.legacy.display = overrides["display"]
        if overrides.get("legacy_enabled") is not None:
            config.legacy.enabled = overrides["legacy_enabled"]

        # Apply overrides to modern config
        if overrides.get("settings_file") is not None:
            config.modern.settings_file = Path(overrides["settings_file"]).expanduser()
        if overrides.get("section") is not None:
            config.modern.section = overrides["section"]
        if overrides.get("output_file") is not None:
            config.modern.output_file = Path(overrides["output_file"]).expanduser()
        if overrides.get("daemon") is not None:
            config.modern.daemon = overrides["daemon"]
        if overrides.get("regenerate") is not None:
            config.modern.regenerate = overrides["regenerate"]
        if overrides.get("signal") is not None:
            config.modern.signal = overrides["signal"]
        if overrides.get("modern_enabled") is not None:
            config.modern.enabled = overrides["modern_enabled"]

        return config
