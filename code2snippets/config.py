from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

# Relative to the user config directory.
VSCODE_SNIPPETS_FOLDER = os.path.join("Code", "User", "snippets")

DEFAULT_INDENT = "    "


def user_config_dir() -> str | None:
    """Return the platform user configuration directory, or None if unknown."""
    if sys.platform == "win32":
        return os.getenv("APPDATA") or None

    if sys.platform == "darwin":
        home = os.path.expanduser("~")
        if home == "~":
            return None
        return os.path.join(home, "Library", "Application Support")

    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return xdg
    home = os.path.expanduser("~")
    if home == "~":
        return None
    return os.path.join(home, ".config")


def default_output_dir() -> str:
    """Location of the VS Code user snippets folder.

    See https://code.visualstudio.com/docs/getstarted/settings#_settings-file-locations
    """
    config_dir = user_config_dir()
    if config_dir is None:
        return ""
    return os.path.join(config_dir, VSCODE_SNIPPETS_FOLDER)


@dataclass(slots=True)
class SnippetConfig:
    """Options for a single conversion run."""

    indent: str = DEFAULT_INDENT
    output_dir: str = field(default_factory=default_output_dir)
    show_progress: bool | None = None


__all__ = [
    "DEFAULT_INDENT",
    "SnippetConfig",
    "VSCODE_SNIPPETS_FOLDER",
    "default_output_dir",
    "user_config_dir",
]
