"""
Reload orchestration.

Runs the GTK2 (X11 client message) and GTK3/4 (xsettingsd) pipelines
independently and folds their failures into the process exit status.
"""

from __future__ import annotations

import logging

from themereload.common.config import Config, LegacyConfig, ModernConfig
from themereload.common.types import PipelineFailure
from themereload.daemon.supervisor import daemon_reload
from themereload.x11.display import DisplayManager
from themereload.x11.walker import ClientMessageWalker
from themereload.xsettings.translator import daemonConfig_regenerate

logger = logging.getLogger(__name__)

__all__ = [
    "legacyClients_notify",
    "modernClients_notify",
    "clients_notify",
    "exitCode_get",
]


def legacyClients_notify(legacy: LegacyConfig) -> None:
    """
    Send the rc-file reload message to every GTK2 toplevel.

    Args:
        legacy:
            Legacy pipeline configuration.

    Raises:
        Xlib.error.DisplayError: If no display is reachable.
        Xlib.error.XError: On any protocol error during the walk.
    """
    with DisplayManager(legacy.display) as display_manager:
        walker = ClientMessageWalker(
            display_manager,
            message_type=legacy.message_type,
            state_property=legacy.state_property,
        )
        notified: int = walker.screens_notify()
    logger.info(f"Sent {legacy.message_type} to {notified} window(s)")


def modernClients_notify(modern: ModernConfig) -> bool:
    """
    Regenerate the xsettingsd config and get the daemon to reload it.

    Args:
        modern:
            Modern pipeline configuration.

    Returns:
        False if the daemon is neither running nor installed.

    Raises:
        OSError: If the daemon config cannot be written or the daemon started.
    """
    if modern.regenerate:
        daemonConfig_regenerate(modern.settings_file, modern.section, modern.output_file)
    else:
        logger.debug("Config regeneration disabled")

    if not modern.signal:
        logger.debug("Daemon signaling disabled")
        return True

    return daemon_reload(modern.daemon).isAvailable()


def clients_notify(config: Config) -> PipelineFailure:
    """
    Run both pipelines; a failure in one never stops the other.

    Args:
        config:
            Loaded configuration.

    Returns:
        Bits of the pipelines that failed.
    """
    failures = PipelineFailure.NONE

    if config.legacy.enabled:
        try:
            legacyClients_notify(config.legacy)
        except Exception as e:
            logger.error(f"GTK2 reload failed (display {config.legacy.display or 'default'}): {e}")
            failures |= PipelineFailure.LEGACY

    if config.modern.enabled:
        try:
            if not modernClients_notify(config.modern):
                failures |= PipelineFailure.MODERN
        except Exception as e:
            logger.error(f"xsettingsd reload failed ({config.modern.daemon}): {e}")
            failures |= PipelineFailure.MODERN

    return failures


def exitCode_get(failures: PipelineFailure, force: bool) -> int:
    """
    Map pipeline failures to the process exit code.

    Args:
        failures:
            Failed pipeline bits.
        force:
            Report success no matter what failed.

    Returns:
        0-3 exit code.
    """
    if force:
        return 0
    return int(failures)
