"""GTK2 rc-file reload via X11 client messages

GTK2 applications re-read their rc files when one of their toplevel windows
receives a _GTK_READ_RCFILES client message. Toplevels are recognised by the
WM_STATE property the window manager puts on managed client windows.
"""

from __future__ import annotations

import logging
from typing import Any

from Xlib import X
from Xlib.protocol import event

from themereload.common.settings import settings
from themereload.x11.display import DisplayManager

logger = logging.getLogger(__name__)


class ClientMessageWalker:
    """Walks every screen's window tree and sends one reload message per toplevel"""

    def __init__(
        self,
        display_manager: DisplayManager,
        message_type: str = "_GTK_READ_RCFILES",
        state_property: str = "WM_STATE",
    ) -> None:
        """
        Initialize walker

        Args:
            display_manager: Connected display manager
            message_type: Atom name used as the client message type
            state_property: Property whose presence marks an addressable window
        """
        self._display_manager: DisplayManager = display_manager
        self._message_type_name: str = message_type
        self._state_property_name: str = state_property
        self._message_type_atom: int | None = None
        self._state_property_atom: int | None = None
        self._notified_count: int = 0

    def screens_notify(self) -> int:
        """
        Notify every addressable window on every screen

        Returns:
            Number of windows a message was sent to

        Raises:
            Xlib.error.XError: On any protocol error (e.g. a window vanished)
            Xlib.error.ConnectionClosedError: If the server went away
        """
        self._message_type_atom = self._display_manager.atom_get(self._message_type_name)
        self._state_property_atom = self._display_manager.atom_get(self._state_property_name)
        self._notified_count = 0

        for root in self._display_manager.screenRoots_get():
            self.subtree_notify(root, depth=0, ancestors=())

        # Surface any asynchronous send_event errors before reporting success
        self._display_manager.display_get().sync()
        return self._notified_count

    def subtree_notify(self, window: Any, depth: int, ancestors: tuple[int, ...]) -> bool:
        """
        Post-order walk of one subtree

        A window carrying the state property gets the message and its
        children are not visited. Otherwise every child is walked; a depth 1
        window none of whose descendants was addressable gets the message
        itself.

        Args:
            window: Window to visit
            depth: Distance from the screen root (root is 0)
            ancestors: Ids of the windows above this one, root first

        Returns:
            True if a message was sent anywhere in this subtree
        """
        has_state: bool = self.stateProperty_has(window)
        sent: bool = False
        delivered: bool = False

        if has_state:
            self.window_notify(window)
            sent = True
        else:
            child_ancestors: tuple[int, ...] = ancestors + (window.id,)
            for child in window.query_tree().children:
                if self.subtree_notify(child, depth + 1, child_ancestors):
                    delivered = True
            # Frames are often the only depth 1 window a WM leaves us
            if not delivered and depth == settings.FALLBACK_DEPTH:
                self.window_notify(window)
                sent = True

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"window 0x{window.id:x} state={has_state} sent={sent} "
                f"name={self.windowName_get(window)!r} "
                f"ancestors=[{' '.join(f'0x{a:x}' for a in ancestors)}]"
            )
        return sent or delivered

    def stateProperty_has(self, window: Any) -> bool:
        """
        Check whether a window carries the state property (value is ignored)

        Args:
            window: Window to query

        Returns:
            True if the property exists on the window
        """
        reply = window.get_full_property(self._state_property_atom, X.AnyPropertyType)
        return reply is not None

    def window_notify(self, window: Any) -> None:
        """
        Send the reload client message to exactly this window

        Args:
            window: Target window
        """
        window.send_event(self.message_build(window), event_mask=X.NoEventMask, propagate=False)
        self._notified_count += 1

    def message_build(self, window: Any) -> event.ClientMessage:
        """
        Build the zero-payload reload client message for a window

        Args:
            window: Target window

        Returns:
            ClientMessage event
        """
        payload: bytes = bytes(settings.CLIENT_MESSAGE_PAYLOAD_SIZE)
        return event.ClientMessage(
            window=window.id,
            client_type=self._message_type_atom,
            data=(settings.CLIENT_MESSAGE_FORMAT, payload),
        )

    @staticmethod
    def windowName_get(window: Any) -> str:
        """
        Get a window's WM_NAME truncated for logging

        Returns:
            Truncated name, empty string if the window has none
        """
        name = window.get_wm_name()
        if not name:
            return ""
        if isinstance(name, bytes):
            name = name.decode("utf-8", errors="replace")
        return name[: settings.WINDOW_NAME_MAX_LENGTH]
