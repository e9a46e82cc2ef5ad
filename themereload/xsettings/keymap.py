"""GTK settings.ini key to XSettings name/type table

The types here are the GParamSpec value types GTK registers for each
GtkSettings property. They replace asking a live GtkSettings instance, so the
translator works without a GTK runtime.
"""

from types import MappingProxyType
from typing import Mapping

from themereload.common.types import SemanticType, SettingSpec

KEYMAP_VERSION = "3.24"
"""GTK release the table was checked against"""

_B = SemanticType.BOOL
_S = SemanticType.STRING
_I = SemanticType.INT


def _enum(xsettings_name: str, enum_type: str) -> SettingSpec:
    return SettingSpec(xsettings_name, SemanticType.ENUM, enum_type)


GTK_ENUMS: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "GtkToolbarStyle": MappingProxyType({
        "GTK_TOOLBAR_ICONS": 0, "icons": 0,
        "GTK_TOOLBAR_TEXT": 1, "text": 1,
        "GTK_TOOLBAR_BOTH": 2, "both": 2,
        "GTK_TOOLBAR_BOTH_HORIZ": 3, "both-horiz": 3,
    }),
    "GtkIconSize": MappingProxyType({
        "GTK_ICON_SIZE_INVALID": 0, "invalid": 0,
        "GTK_ICON_SIZE_MENU": 1, "menu": 1,
        "GTK_ICON_SIZE_SMALL_TOOLBAR": 2, "small-toolbar": 2,
        "GTK_ICON_SIZE_LARGE_TOOLBAR": 3, "large-toolbar": 3,
        "GTK_ICON_SIZE_BUTTON": 4, "button": 4,
        "GTK_ICON_SIZE_DND": 5, "dnd": 5,
        "GTK_ICON_SIZE_DIALOG": 6, "dialog": 6,
    }),
    "GtkIMPreeditStyle": MappingProxyType({
        "GTK_IM_PREEDIT_NOTHING": 0, "nothing": 0,
        "GTK_IM_PREEDIT_CALLBACK": 1, "callback": 1,
        "GTK_IM_PREEDIT_NONE": 2, "none": 2,
    }),
    "GtkIMStatusStyle": MappingProxyType({
        "GTK_IM_STATUS_NOTHING": 0, "nothing": 0,
        "GTK_IM_STATUS_CALLBACK": 1, "callback": 1,
        "GTK_IM_STATUS_NONE": 2, "none": 2,
    }),
    "GtkCornerType": MappingProxyType({
        "GTK_CORNER_TOP_LEFT": 0, "top-left": 0,
        "GTK_CORNER_BOTTOM_LEFT": 1, "bottom-left": 1,
        "GTK_CORNER_TOP_RIGHT": 2, "top-right": 2,
        "GTK_CORNER_BOTTOM_RIGHT": 3, "bottom-right": 3,
    }),
    "GtkPolicyType": MappingProxyType({
        "GTK_POLICY_ALWAYS": 0, "always": 0,
        "GTK_POLICY_AUTOMATIC": 1, "automatic": 1,
        "GTK_POLICY_NEVER": 2, "never": 2,
        "GTK_POLICY_EXTERNAL": 3, "external": 3,
    }),
})
"""Value names and nicks of the GTK enums settings can hold"""


SETTINGS_KEYMAP: Mapping[str, SettingSpec] = MappingProxyType({
    # Net/ (freedesktop XSettings registry)
    "gtk-double-click-time": SettingSpec("Net/DoubleClickTime", _I),
    "gtk-double-click-distance": SettingSpec("Net/DoubleClickDistance", _I),
    "gtk-dnd-drag-threshold": SettingSpec("Net/DndDragThreshold", _I),
    "gtk-cursor-blink": SettingSpec("Net/CursorBlink", _B),
    "gtk-cursor-blink-time": SettingSpec("Net/CursorBlinkTime", _I),
    "gtk-theme-name": SettingSpec("Net/ThemeName", _S),
    "gtk-icon-theme-name": SettingSpec("Net/IconThemeName", _S),
    "gtk-fallback-icon-theme": SettingSpec("Net/FallbackIconTheme", _S),
    "gtk-sound-theme-name": SettingSpec("Net/SoundThemeName", _S),
    "gtk-enable-event-sounds": SettingSpec("Net/EnableEventSounds", _B),
    "gtk-enable-input-feedback-sounds": SettingSpec("Net/EnableInputFeedbackSounds", _B),
    # Gtk/
    "gtk-cursor-blink-timeout": SettingSpec("Gtk/CursorBlinkTimeout", _I),
    "gtk-color-palette": SettingSpec("Gtk/ColorPalette", _S),
    "gtk-font-name": SettingSpec("Gtk/FontName", _S),
    "gtk-key-theme-name": SettingSpec("Gtk/KeyThemeName", _S),
    "gtk-toolbar-style": _enum("Gtk/ToolbarStyle", "GtkToolbarStyle"),
    "gtk-toolbar-icon-size": _enum("Gtk/ToolbarIconSize", "GtkIconSize"),
    "gtk-im-preedit-style": _enum("Gtk/IMPreeditStyle", "GtkIMPreeditStyle"),
    "gtk-im-status-style": _enum("Gtk/IMStatusStyle", "GtkIMStatusStyle"),
    "gtk-im-module": SettingSpec("Gtk/IMModule", _S),
    "gtk-modules": SettingSpec("Gtk/Modules", _S),
    "gtk-file-chooser-backend": SettingSpec("Gtk/FileChooserBackend", _S),
    "gtk-button-images": SettingSpec("Gtk/ButtonImages", _B),
    "gtk-menu-images": SettingSpec("Gtk/MenuImages", _B),
    "gtk-menu-bar-accel": SettingSpec("Gtk/MenuBarAccel", _S),
    "gtk-cursor-theme-name": SettingSpec("Gtk/CursorThemeName", _S),
    "gtk-cursor-theme-size": SettingSpec("Gtk/CursorThemeSize", _I),
    "gtk-show-input-method-menu": SettingSpec("Gtk/ShowInputMethodMenu", _B),
    "gtk-show-unicode-menu": SettingSpec("Gtk/ShowUnicodeMenu", _B),
    "gtk-timeout-initial": SettingSpec("Gtk/TimeoutInitial", _I),
    "gtk-timeout-repeat": SettingSpec("Gtk/TimeoutRepeat", _I),
    "gtk-color-scheme": SettingSpec("Gtk/ColorScheme", _S),
    "gtk-enable-animations": SettingSpec("Gtk/EnableAnimations", _B),
    "gtk-touchscreen-mode": SettingSpec("Gtk/TouchscreenMode", _B),
    "gtk-enable-accels": SettingSpec("Gtk/EnableAccels", _B),
    "gtk-enable-mnemonics": SettingSpec("Gtk/EnableMnemonics", _B),
    "gtk-auto-mnemonics": SettingSpec("Gtk/AutoMnemonics", _B),
    "gtk-can-change-accels": SettingSpec("Gtk/CanChangeAccels", _B),
    "gtk-scrolled-window-placement": _enum("Gtk/ScrolledWindowPlacement", "GtkCornerType"),
    "gtk-visible-focus": _enum("Gtk/VisibleFocus", "GtkPolicyType"),
    "gtk-shell-shows-app-menu": SettingSpec("Gtk/ShellShowsAppMenu", _B),
    "gtk-shell-shows-menubar": SettingSpec("Gtk/ShellShowsMenubar", _B),
    "gtk-shell-shows-desktop": SettingSpec("Gtk/ShellShowsDesktop", _B),
    "gtk-session-bus-id": SettingSpec("Gtk/SessionBusId", _S),
    "gtk-decoration-layout": SettingSpec("Gtk/DecorationLayout", _S),
    "gtk-titlebar-double-click": SettingSpec("Gtk/TitlebarDoubleClick", _S),
    "gtk-titlebar-middle-click": SettingSpec("Gtk/TitlebarMiddleClick", _S),
    "gtk-titlebar-right-click": SettingSpec("Gtk/TitlebarRightClick", _S),
    "gtk-dialogs-use-header": SettingSpec("Gtk/DialogsUseHeader", _B),
    "gtk-enable-primary-paste": SettingSpec("Gtk/EnablePrimaryPaste", _B),
    "gtk-recent-files-enabled": SettingSpec("Gtk/RecentFilesEnabled", _B),
    "gtk-recent-files-max-age": SettingSpec("Gtk/RecentFilesMaxAge", _I),
    "gtk-keynav-use-caret": SettingSpec("Gtk/KeynavUseCaret", _B),
    "gtk-overlay-scrolling": SettingSpec("Gtk/OverlayScrolling", _B),
    # Xft/
    "gtk-xft-antialias": SettingSpec("Xft/Antialias", _I),
    "gtk-xft-hinting": SettingSpec("Xft/Hinting", _I),
    "gtk-xft-hintstyle": SettingSpec("Xft/HintStyle", _S),
    "gtk-xft-rgba": SettingSpec("Xft/RGBA", _S),
    "gtk-xft-dpi": SettingSpec("Xft/DPI", _I),
})
"""settings.ini key -> XSettings name and value type"""


def keymapTable_format() -> str:
    """
    Render the key table for --dump-types

    Returns:
        One aligned "<gtk key> <xsettings name> <type>" row per key
    """
    key_width: int = max(len(key) for key in SETTINGS_KEYMAP)
    name_width: int = max(len(spec.xsettings_name) for spec in SETTINGS_KEYMAP.values())
    rows: list[str] = [f"# GTK {KEYMAP_VERSION} settings table"]
    for key, spec in SETTINGS_KEYMAP.items():
        type_label: str = spec.enum_type or spec.semantic_type.value
        rows.append(f"{key:<{key_width}}  {spec.xsettings_name:<{name_width}}  {type_label}")
    return "\n".join(rows) + "\n"
