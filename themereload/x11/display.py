"""X11 display connection and management"""

import logging
from typing import Any, Optional

from Xlib import display as xdisplay
from Xlib.display import Display

logger = logging.getLogger(__name__)


class DisplayManager:
    """Manages X11 display connection and screen enumeration"""

    def __init__(self, display_name: Optional[str] = None) -> None:
        """
        Initialize display manager

        Args:
            display_name: X11 display name (e.g., ':0'), None for $DISPLAY
        """
        self._display: Optional[Display] = None
        self._display_name: Optional[str] = display_name

    def connection_establish(self) -> None:
        """
        Establish connection to X11 display

        Raises:
            Xlib.error.DisplayError: If no display name is set or the
                server cannot be reached
        """
        self._display = xdisplay.Display(self._display_name)
        logger.debug(f"Connected to display {self._display.get_display_name()}")

    def connection_close(self) -> None:
        """Close X11 display connection"""
        if self._display is not None:
            self._display.close()
            self._display = None

    def display_get(self) -> Display:
        """
        Get X11 display object

        Returns:
            X11 Display object

        Raises:
            RuntimeError: If not connected to display
        """
        if self._display is None:
            raise RuntimeError("Not connected to X11 display")
        return self._display

    def screenRoots_get(self) -> list[Any]:
        """
        Get the root window of every screen on the display

        Returns:
            Root windows in screen order

        Raises:
            RuntimeError: If not connected to display
        """
        display = self.display_get()
        return [display.screen(number).root for number in range(display.screen_count())]

    def atom_get(self, name: str) -> int:
        """
        Intern an atom on the current connection

        Args:
            name: Atom name

        Returns:
            Atom identifier

        Raises:
            RuntimeError: If not connected to display
        """
        return self.display_get().intern_atom(name)

    def __enter__(self) -> "DisplayManager":
        """Context manager entry"""
        self.connection_establish()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit"""
        self.connection_close()
