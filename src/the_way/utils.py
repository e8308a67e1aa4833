"""
Shared constants and platform helpers.
"""

from __future__ import annotations

import sys


NAME = "the-way"

# sys.platform prefix -> clipboard command
_COPY_COMMANDS: dict[str, str] = {
    "darwin": "pbcopy",
    "linux": "xclip -in -selection clipboard",
}


def get_default_copy_cmd(platform: str | None = None) -> str | None:
    """Return the clipboard command for *platform* (defaults to the running one)."""
    current = platform or sys.platform
    for prefix, command in _COPY_COMMANDS.items():
        if current.startswith(prefix):
            return command
    return None
