"""xsettingsd discovery, reload signaling and detached launch"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Optional

import psutil

from themereload.common.settings import settings
from themereload.common.types import DaemonOutcome, DaemonResult

logger = logging.getLogger(__name__)


def process_find(name: str) -> Optional[psutil.Process]:
    """
    Find a running process by exact executable name

    Args:
        name: Process name to match

    Returns:
        First matching process, or None
    """
    for proc in psutil.process_iter(["name"]):
        if proc.info.get("name") == name:
            return proc
    return None


def process_signal(proc: psutil.Process) -> bool:
    """
    Send the reload signal to a process

    Returns:
        True if delivered, False if the process exited in the meantime

    Raises:
        psutil.AccessDenied: If the process belongs to someone else
    """
    try:
        proc.send_signal(settings.RELOAD_SIGNAL)
    except psutil.NoSuchProcess:
        logger.debug(f"Process {proc.pid} exited before it could be signaled")
        return False
    return True


def daemon_spawn(executable: str) -> subprocess.Popen[bytes]:
    """
    Start the daemon detached from this process

    The child gets its own session, runs from / and has no stdio attached,
    so it outlives us and is never waited on.

    Args:
        executable: Resolved path of the daemon

    Returns:
        Handle of the started process

    Raises:
        OSError: If the executable cannot be started
    """
    return subprocess.Popen(
        [executable],
        cwd=settings.SPAWN_WORKING_DIRECTORY,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def daemon_reload(name: str) -> DaemonResult:
    """
    Make the named daemon reload its config

    A running instance gets the reload signal. Otherwise the daemon is
    started if it is installed; a fresh instance reads its config on startup
    and is not signaled.

    Args:
        name: Daemon executable name

    Returns:
        SIGNALED, SPAWNED or UNAVAILABLE result
    """
    while True:
        proc = process_find(name)
        if proc is None:
            break
        if process_signal(proc):
            logger.info(f"Sent {settings.RELOAD_SIGNAL.name} to {name} (pid {proc.pid})")
            return DaemonResult(DaemonOutcome.SIGNALED, name, pid=proc.pid)

    executable: Optional[str] = shutil.which(name)
    if executable is None:
        logger.error(f"{name} is not running and was not found on PATH")
        return DaemonResult(DaemonOutcome.UNAVAILABLE, name)

    child = daemon_spawn(executable)
    logger.info(f"{name} was not running, started {executable} (pid {child.pid})")
    return DaemonResult(DaemonOutcome.SPAWNED, name, pid=child.pid, executable=executable)
