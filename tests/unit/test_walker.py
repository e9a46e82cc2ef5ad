"""Unit tests for the GTK2 client message window walker."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
from Xlib import X

from themereload.x11.walker import ClientMessageWalker

_MESSAGE_ATOM = 301
_STATE_ATOM = 302


class _FakeWindow:
    """Fake X11 window recording the client messages it receives."""

    def __init__(
        self,
        window_id: int,
        children: list["_FakeWindow"] | None = None,
        has_state: bool = False,
        name: str | None = None,
    ) -> None:
        """Initialize fake window."""
        self.id: int = window_id
        self.children: list[_FakeWindow] = children or []
        self.has_state: bool = has_state
        self.name: str | None = name
        self.sent: list[tuple[Any, int, bool]] = []
        self.tree_queries: int = 0

    def get_full_property(self, atom: int, property_type: int) -> object | None:
        """Return a property reply only for the state atom on stateful windows."""
        assert property_type == X.AnyPropertyType
        if atom == _STATE_ATOM and self.has_state:
            return SimpleNamespace(value=[1, 0])
        return None

    def query_tree(self) -> SimpleNamespace:
        """Return the child list."""
        self.tree_queries += 1
        return SimpleNamespace(children=self.children)

    def get_wm_name(self) -> str | None:
        """Return the window name."""
        return self.name

    def send_event(self, event: Any, event_mask: int = 0, propagate: bool = False) -> None:
        """Record sent events."""
        self.sent.append((event, event_mask, propagate))


class _FakeDisplay:
    """Fake X11 display counting syncs."""

    def __init__(self) -> None:
        """Initialize fake display state."""
        self.sync_calls: int = 0

    def sync(self) -> None:
        """Record sync calls."""
        self.sync_calls += 1


class _FakeDisplayManager:
    """Fake display manager serving fixed screen roots."""

    def __init__(self, roots: list[_FakeWindow]) -> None:
        """Initialize fake display manager."""
        self._roots = roots
        self.display = _FakeDisplay()
        self.interned: list[str] = []

    def atom_get(self, name: str) -> int:
        """Intern atoms with fixed ids."""
        self.interned.append(name)
        return {"_GTK_READ_RCFILES": _MESSAGE_ATOM, "WM_STATE": _STATE_ATOM}[name]

    def screenRoots_get(self) -> list[_FakeWindow]:
        """Return fake screen roots."""
        return self._roots

    def display_get(self) -> _FakeDisplay:
        """Return fake display."""
        return self.display


def _walk(*roots: _FakeWindow) -> tuple[int, _FakeDisplayManager]:
    manager = _FakeDisplayManager(list(roots))
    walker = ClientMessageWalker(manager)  # type: ignore[arg-type]
    return walker.screens_notify(), manager


class TestStatefulWindows:
    """Windows carrying WM_STATE get exactly one message."""

    def test_stateful_toplevel_notified_once(self) -> None:
        """A managed toplevel gets one message and its parent gets none."""
        client = _FakeWindow(0x20, has_state=True, name="gedit")
        frame = _FakeWindow(0x10, children=[client])
        root = _FakeWindow(0x1, children=[frame])

        count, _ = _walk(root)

        assert count == 1
        assert len(client.sent) == 1
        assert frame.sent == []
        assert root.sent == []

    def test_stateful_window_children_not_visited(self) -> None:
        """Descent stops at the first stateful window on a path."""
        nested = _FakeWindow(0x30, has_state=True)
        client = _FakeWindow(0x20, children=[nested], has_state=True)
        root = _FakeWindow(0x1, children=[client])

        _walk(root)

        assert len(client.sent) == 1
        assert nested.sent == []
        assert client.tree_queries == 0

    def test_deep_stateful_window_suppresses_fallback(self) -> None:
        """A stateful window deep below a frame means the frame gets nothing."""
        client = _FakeWindow(0x40, has_state=True)
        inner = _FakeWindow(0x30, children=[client])
        decoration = _FakeWindow(0x21)
        frame = _FakeWindow(0x10, children=[decoration, inner])
        root = _FakeWindow(0x1, children=[frame])

        count, _ = _walk(root)

        assert count == 1
        assert len(client.sent) == 1
        assert frame.sent == []
        assert inner.sent == []
        assert decoration.sent == []

    def test_stateful_root_gets_message_only(self) -> None:
        """The root is classified like any other window."""
        child = _FakeWindow(0x10, has_state=True)
        root = _FakeWindow(0x1, children=[child], has_state=True)

        count, _ = _walk(root)

        assert count == 1
        assert len(root.sent) == 1
        assert child.sent == []


class TestDepthOneFallback:
    """Documented quirk: only direct children of the root get a fallback message."""

    def test_stateless_toplevel_gets_fallback(self) -> None:
        """A depth 1 window with no stateful descendant is notified itself."""
        leaf = _FakeWindow(0x11)
        frame = _FakeWindow(0x10, children=[leaf])
        root = _FakeWindow(0x1, children=[frame])

        count, _ = _walk(root)

        assert count == 1
        assert len(frame.sent) == 1
        assert leaf.sent == []
        assert root.sent == []

    def test_childless_toplevel_gets_fallback(self) -> None:
        """An override-redirect popup without children still gets one message."""
        popup = _FakeWindow(0x10)
        root = _FakeWindow(0x1, children=[popup])

        count, _ = _walk(root)

        assert count == 1
        assert len(popup.sent) == 1

    def test_no_fallback_below_depth_one(self) -> None:
        """Stateless windows at depth 2 and below never get a fallback."""
        depth3 = _FakeWindow(0x30)
        depth2 = _FakeWindow(0x20, children=[depth3])
        depth1 = _FakeWindow(0x10, children=[depth2])
        root = _FakeWindow(0x1, children=[depth1])

        _walk(root)

        assert depth3.sent == []
        assert depth2.sent == []
        assert len(depth1.sent) == 1

    def test_root_without_children_gets_nothing(self) -> None:
        """The root (depth 0) never gets a fallback."""
        root = _FakeWindow(0x1)

        count, _ = _walk(root)

        assert count == 0
        assert root.sent == []

    def test_mixed_toplevels(self) -> None:
        """Each toplevel is decided on its own subtree."""
        client = _FakeWindow(0x21, has_state=True)
        managed_frame = _FakeWindow(0x20, children=[client])
        bare_frame = _FakeWindow(0x30, children=[_FakeWindow(0x31)])
        root = _FakeWindow(0x1, children=[managed_frame, bare_frame])

        count, _ = _walk(root)

        assert count == 2
        assert len(client.sent) == 1
        assert managed_frame.sent == []
        assert len(bare_frame.sent) == 1


class TestWalk:
    """Connection-level walk behavior."""

    def test_every_screen_walked_and_synced(self) -> None:
        """All screen roots are visited and the connection synced once."""
        first = _FakeWindow(0x10, has_state=True)
        second = _FakeWindow(0x20, has_state=True)

        count, manager = _walk(
            _FakeWindow(0x1, children=[first]),
            _FakeWindow(0x2, children=[second]),
        )

        assert count == 2
        assert len(first.sent) == 1
        assert len(second.sent) == 1
        assert manager.display.sync_calls == 1

    def test_atoms_interned_once_per_walk(self) -> None:
        """Message type and state atoms are interned once, not per window."""
        root = _FakeWindow(0x1, children=[_FakeWindow(0x10), _FakeWindow(0x20)])

        _, manager = _walk(root)

        assert sorted(manager.interned) == ["WM_STATE", "_GTK_READ_RCFILES"]

    def test_message_is_targeted_and_zeroed(self) -> None:
        """The message carries 20 zero bytes and never propagates."""
        client = _FakeWindow(0x20, has_state=True)

        _walk(_FakeWindow(0x1, children=[client]))

        sent_event, event_mask, propagate = client.sent[0]
        assert event_mask == X.NoEventMask
        assert propagate is False
        assert sent_event.window == 0x20
        assert sent_event.client_type == _MESSAGE_ATOM
        assert sent_event.data[0] == 8
        assert bytes(sent_event.data[1]) == bytes(20)

    def test_protocol_error_aborts_walk(self) -> None:
        """A window vanishing mid-walk aborts the walk."""

        class _VanishedWindow(_FakeWindow):
            def query_tree(self) -> SimpleNamespace:
                raise RuntimeError("BadWindow")

        later = _FakeWindow(0x30, has_state=True)
        root = _FakeWindow(0x1, children=[_VanishedWindow(0x10), later])

        with pytest.raises(RuntimeError, match="BadWindow"):
            _walk(root)
        assert later.sent == []

    def test_visit_logged_with_ancestors(self, caplog) -> None:
        """Each visit logs id, state, delivery, truncated name and ancestors."""
        client = _FakeWindow(0x20, has_state=True, name="x" * 50)
        frame = _FakeWindow(0x10, children=[client])

        _walk(_FakeWindow(0x1, children=[frame]))

        client_lines = [r.getMessage() for r in caplog.records if r.getMessage().startswith("window 0x20 ")]
        assert client_lines == [
            f"window 0x20 state=True sent=True name={'x' * 30!r} ancestors=[0x1 0x10]"
        ]
