"""Application settings singleton - single source of truth for fixed constants

This module provides a singleton Settings class that consolidates:
1. Wire-level constants (client message payload, daemon config framing)
2. Application constants (truthy spellings, log truncation, reload signal)

Runtime configuration from config.yml lives in themereload.common.config
and is passed explicitly to the pipelines.

Usage:
    from themereload.common.settings import settings

    # Use anywhere in the application
    if raw_value in settings.TRUTHY_VALUES:
        ...
"""

import signal
from typing import Optional


class Settings:
    """Singleton holder of fixed constants

    The singleton pattern ensures all parts of the application use the same
    constants.
    """

    _instance: Optional["Settings"] = None

    def __new__(cls) -> "Settings":
        """Ensure only one Settings instance exists"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize settings singleton (only runs once)"""
        if hasattr(self, "_initialized"):
            return
        self._initialized = True

    # =========================================================================
    # X11 Client Message Constants
    # =========================================================================

    CLIENT_MESSAGE_FORMAT: int = 8
    """ClientMessage data format (bits per data item)"""

    CLIENT_MESSAGE_PAYLOAD_SIZE: int = 20
    """ClientMessage data length in bytes; the payload is all zeroes"""

    WINDOW_NAME_MAX_LENGTH: int = 30
    """Window names are truncated to this many characters in walk logs"""

    FALLBACK_DEPTH: int = 1
    """Tree depth at which an undelivered subtree gets a fallback message

    Depth 1 windows are direct children of the root, usually window manager
    frames that do not carry WM_STATE themselves.
    """

    # =========================================================================
    # xsettingsd Config Constants
    # =========================================================================

    CONFIG_HEADER_LINES: tuple[str, ...] = (
        "# This file is managed by themereload.",
        "# Manual changes may be overwritten.",
    )
    """Comment lines written at the top of every generated daemon config"""

    TRUTHY_VALUES: frozenset[str] = frozenset({"1", "true", "TRUE"})
    """Raw settings.ini spellings that encode a boolean as 1"""

    # =========================================================================
    # Daemon Constants
    # =========================================================================

    RELOAD_SIGNAL: signal.Signals = signal.SIGHUP
    """Signal that makes xsettingsd re-read its config"""

    SPAWN_WORKING_DIRECTORY: str = "/"
    """Working directory of a freshly spawned daemon"""


# Global singleton instance
settings = Settings()
"""Global settings singleton instance

Import this anywhere in the application:
    from themereload.common.settings import settings
"""
