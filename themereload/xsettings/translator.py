"""GTK settings.ini to xsettingsd config translation"""

from __future__ import annotations

import configparser
import logging
import re
from pathlib import Path
from typing import Callable, Iterable, Mapping, Optional

from themereload.common.settings import settings
from themereload.common.types import SemanticType, SettingSpec
from themereload.xsettings.keymap import GTK_ENUMS, SETTINGS_KEYMAP

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

# Section headers are single lines, so no settings.ini can declare this one
_NO_DEFAULT_SECTION = "\n"


def boolValue_encode(raw: str, spec: SettingSpec) -> str:
    """Encode a boolean as 1/0; anything outside the truthy spellings is false"""
    return "1" if raw in settings.TRUTHY_VALUES else "0"


def stringValue_encode(raw: str, spec: SettingSpec) -> str:
    """Quote a string, escaping embedded double quotes

    Backslashes are copied as-is, so a value ending in one escapes the
    closing quote when xsettingsd parses the line.
    """
    escaped: str = raw.replace('"', '\\"')
    return f'"{escaped}"'


def intValue_encode(raw: str, spec: SettingSpec) -> str:
    """
    Encode a decimal integer

    Raises:
        ValueError: If raw is not a decimal integer
    """
    text: str = raw.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a decimal integer: {raw!r}")
    return str(int(text, 10))


def enumValue_encode(raw: str, spec: SettingSpec) -> str:
    """
    Encode an enum by its numeric value

    Decimal values pass through; GTK value names (GTK_TOOLBAR_ICONS) and
    nicks (icons) of the setting's enum are looked up.

    Raises:
        ValueError: If raw is neither a decimal nor a known value name
    """
    text: str = raw.strip()
    if _DECIMAL_RE.fullmatch(text):
        return str(int(text, 10))
    values: Mapping[str, int] = GTK_ENUMS.get(spec.enum_type or "", {})
    if text in values:
        return str(values[text])
    raise ValueError(f"not a {spec.enum_type} value: {raw!r}")


VALUE_ENCODERS: Mapping[SemanticType, Callable[[str, SettingSpec], str]] = {
    SemanticType.BOOL: boolValue_encode,
    SemanticType.STRING: stringValue_encode,
    SemanticType.INT: intValue_encode,
    SemanticType.ENUM: enumValue_encode,
}


def entries_translate(
    entries: Iterable[tuple[str, str]],
    keymap: Mapping[str, SettingSpec] = SETTINGS_KEYMAP,
) -> list[str]:
    """
    Translate settings.ini entries into xsettingsd config lines

    Entries keep their input order. Unmapped keys are skipped quietly;
    mapped keys with an unsupported type or an unparsable value are skipped
    with a warning.

    Args:
        entries: (key, raw value) pairs of the settings section
        keymap: GTK key -> XSettings spec table

    Returns:
        "<xsettings name> <encoded value>" lines, without newlines
    """
    lines: list[str] = []
    for key, raw in entries:
        spec: Optional[SettingSpec] = keymap.get(key)
        if spec is None:
            logger.debug(f"Skipping unmapped setting '{key}'")
            continue

        encoder = VALUE_ENCODERS.get(spec.semantic_type)
        if encoder is None:
            logger.warning(f"Skipping setting '{key}': unsupported type {spec.semantic_type!r}")
            continue

        try:
            encoded: str = encoder(raw, spec)
        except ValueError as e:
            logger.warning(f"Skipping setting '{key}': {e}")
            continue

        lines.append(f"{spec.xsettings_name} {encoded}")
    return lines


def configText_render(lines: Iterable[str]) -> str:
    """
    Frame translated lines as a complete xsettingsd config file

    Returns:
        Header comments plus one line per entry, newline-terminated
    """
    all_lines: list[str] = [*settings.CONFIG_HEADER_LINES, *lines]
    return "".join(f"{line}\n" for line in all_lines)


def settingsSection_read(path: Path, section: str) -> Optional[list[tuple[str, str]]]:
    """
    Read the key/value pairs of one section of a settings.ini file

    Args:
        path: settings.ini path
        section: Section name (GTK uses "Settings")

    Returns:
        Ordered (key, raw value) pairs, or None when the file cannot be
        read, does not parse, or lacks the section
    """
    # Repeated keys keep the last value, as GKeyFile does; [DEFAULT] is an
    # ordinary section and is not merged into the one we read
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        default_section=_NO_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]

    try:
        with open(path, "r", encoding="utf-8") as f:
            parser.read_file(f)
    except OSError as e:
        logger.warning(f"Cannot read settings file {path}: {e}")
        return None
    except (configparser.Error, UnicodeDecodeError) as e:
        logger.warning(f"Malformed settings file {path}: {e}")
        return None

    if not parser.has_section(section):
        logger.warning(f"Settings file {path} has no [{section}] section")
        return None

    return [(key, value) for key, value in parser.items(section, raw=True)]


def daemonConfig_write(path: Path, text: str) -> None:
    """
    Replace the daemon config file with text (truncate and write)

    Raises:
        OSError: If the directory cannot be created or the file written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def daemonConfig_regenerate(settings_file: Path, section: str, output_file: Path) -> bool:
    """
    Rebuild the xsettingsd config from a settings.ini section

    Args:
        settings_file: Source settings.ini
        section: Source section name
        output_file: xsettingsd config to replace

    Returns:
        True if the output file was written, False if the source was skipped

    Raises:
        OSError: If the output file cannot be written
    """
    entries = settingsSection_read(settings_file, section)
    if entries is None:
        return False

    lines: list[str] = entries_translate(entries)
    daemonConfig_write(output_file, configText_render(lines))
    logger.info(f"Wrote {len(lines)} setting(s) from {settings_file} to {output_file}")
    return True
