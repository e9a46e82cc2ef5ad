"""Unit tests for logging setup."""

from __future__ import annotations

import logging

from themereload import __version__
from themereload.common import app_logging


class TestLogFormat:
    """Tests for version injection into the log format."""

    def test_version_follows_timestamp(self) -> None:
        """The version tag is placed right after the timestamp."""
        fmt = app_logging.logFormatWithVersion_get("%(asctime)s %(message)s")
        assert fmt == f"%(asctime)s [v{__version__}] %(message)s"

    def test_format_without_timestamp_unchanged(self) -> None:
        """A format with no timestamp gets no version tag."""
        assert app_logging.logFormatWithVersion_get("%(message)s") == "%(message)s"


class TestLoggingSetup:
    """Tests for handler wiring."""

    def test_file_handler_added(self, monkeypatch, tmp_path) -> None:
        """A log file adds a file handler after the stream handler."""
        captured: dict[str, object] = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
        log_file = tmp_path / "themereload.log"

        app_logging.logging_setup("debug", "%(asctime)s %(message)s", str(log_file))

        handlers = captured["handlers"]
        try:
            assert captured["level"] == logging.DEBUG
            assert captured["format"] == f"%(asctime)s [v{__version__}] %(message)s"
            assert len(handlers) == 2
            assert isinstance(handlers[0], logging.StreamHandler)
            assert isinstance(handlers[1], logging.FileHandler)
            assert handlers[1].baseFilename == str(log_file)
        finally:
            for handler in handlers:
                handler.close()

    def test_stream_only_without_file(self, monkeypatch) -> None:
        """Without a log file only the stream handler is installed."""
        captured: dict[str, object] = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

        app_logging.logging_setup("WARNING", "%(message)s", None)

        assert captured["level"] == logging.WARNING
        assert captured["format"] == "%(message)s"
        assert [type(h) for h in captured["handlers"]] == [logging.StreamHandler]
