"""themereload command-line interface"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from themereload import __version__
from themereload.common.app_logging import logging_setup
from themereload.common.config import Config, ConfigLoader
from themereload.reload import clients_notify, exitCode_get
from themereload.xsettings.keymap import keymapTable_format

logger = logging.getLogger(__name__)


def arguments_parse(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments

    Args:
        argv: Argument list, None for sys.argv

    Returns:
        Parsed CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="themereload",
        description="Make running GTK2 and GTK3/4 applications pick up theme changes",
        epilog="Exit status: bit 0 set if GTK2 notification failed, bit 1 if xsettingsd failed.",
    )

    parser.add_argument("--version", action="version", version=f"themereload {__version__}")

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: search standard locations)",
    )

    parser.add_argument(
        "--display", type=str, default=None, help="X11 display name (overrides config)"
    )

    parser.add_argument(
        "--settings-file",
        type=str,
        default=None,
        dest="settings_file",
        help="GTK settings.ini to translate (default: ~/.config/gtk-3.0/settings.ini)",
    )

    parser.add_argument(
        "--section",
        type=str,
        default=None,
        help="Section of the settings file to translate (default: Settings)",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="xsettingsd config to write (default: ~/.config/xsettingsd/xsettingsd.conf)",
    )

    parser.add_argument(
        "--daemon",
        type=str,
        default=None,
        help="XSettings daemon process name (default: xsettingsd)",
    )

    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Do not regenerate the xsettingsd config",
    )

    parser.add_argument(
        "--no-signal",
        action="store_true",
        dest="no_signal",
        help="Do not signal or start the XSettings daemon",
    )

    parser.add_argument(
        "--no-legacy",
        action="store_true",
        dest="no_legacy",
        help="Skip notifying GTK2 clients over X11",
    )

    parser.add_argument(
        "--no-modern",
        action="store_true",
        dest="no_modern",
        help="Skip the xsettingsd config and daemon reload",
    )

    parser.add_argument(
        "--dump-types",
        action="store_true",
        dest="dump_types",
        help="Print the settings key/type table and exit without side effects",
    )

    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Always exit with status 0",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging (overrides config)"
    )

    parser.add_argument(
        "--info", action="store_true", help="Enable info logging (overrides config)"
    )

    parser.add_argument(
        "--warning", action="store_true", help="Enable warning logging (overrides config)"
    )

    parser.add_argument(
        "--error", action="store_true", help="Enable error logging (overrides config)"
    )

    parser.add_argument(
        "--critical", action="store_true", help="Enable critical logging (overrides config)"
    )

    return parser.parse_args(argv)


def logLevelOverride_get(args: argparse.Namespace) -> str | None:
    """
    Resolve explicit log level override flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Selected log level or None.
    """
    if args.critical:
        return "CRITICAL"
    if args.error:
        return "ERROR"
    if args.warning:
        return "WARNING"
    if args.info:
        return "INFO"
    if args.debug:
        return "DEBUG"
    return None


def flagOverride_get(flag: bool) -> bool | None:
    """Map a disabling store_true flag to a config override (None = leave config alone)"""
    return False if flag else None


def configWithOverrides_load(args: argparse.Namespace) -> Config:
    """
    Load configuration and apply CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Loaded config.

    Raises:
        FileNotFoundError: If an explicit --config file does not exist.
        ValueError: If the config file is invalid.
    """
    config_path: Path | None = Path(args.config) if args.config else None
    config: Config = ConfigLoader.configWithOverrides_load(
        file_path=config_path,
        display=args.display,
        settings_file=args.settings_file,
        section=args.section,
        output_file=args.output,
        daemon=args.daemon,
        regenerate=flagOverride_get(args.no_config),
        signal=flagOverride_get(args.no_signal),
        legacy_enabled=flagOverride_get(args.no_legacy),
        modern_enabled=flagOverride_get(args.no_modern),
    )
    return config


def run(argv: list[str] | None = None) -> int:
    """
    Run themereload and return its exit status

    Args:
        argv: Argument list, None for sys.argv

    Returns:
        Process exit status.
    """
    args = arguments_parse(argv)

    if args.dump_types:
        sys.stdout.write(keymapTable_format())
        return 0

    try:
        config = configWithOverrides_load(args)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 0 if args.force else 1

    log_level: str = logLevelOverride_get(args) or config.logging.level
    logging_setup(log_level, config.logging.format, config.logging.file)

    failures = clients_notify(config)
    if failures:
        logger.warning(f"Reload incomplete: {failures!r}")
    return exitCode_get(failures, args.force)


def main() -> NoReturn:
    """Main entry point for the themereload command"""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
