"""
System clipboard access.

Shells out to the platform clipboard utility; the first one found on
PATH wins.
"""

from __future__ import annotations

import shutil
import subprocess

from ..core.exceptions import ClipboardUnavailableError

# (executable, extra args) in preference order
CLIPBOARD_COMMANDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("pbcopy", ()),
    ("wl-copy", ()),
    ("xclip", ("-selection", "clipboard")),
    ("xsel", ("--clipboard", "--input")),
    ("clip", ()),
)


def find_clipboard_command() -> list[str] | None:
    """Return the argv of the first available clipboard utility, or None."""
    for name, args in CLIPBOARD_COMMANDS:
        path = shutil.which(name)
        if path:
            return [path, *args]
    return None


def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy; an empty string is not copied

    Returns:
        True if text was copied, False if there was nothing to copy

    Raises:
        ClipboardUnavailableError: If no clipboard utility is installed
            or the utility failed
    """
    text = text.strip()
    if not text:
        return False

    command = find_clipboard_command()
    if command is None:
        raise ClipboardUnavailableError(
            "No clipboard utility found",
            context={"tried": ", ".join(name for name, _ in CLIPBOARD_COMMANDS)},
        )

    try:
        subprocess.run(command, input=text, text=True, check=True, capture_output=True, timeout=5)
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
        raise ClipboardUnavailableError(
            "Clipboard utility failed",
            context={"command": command[0]},
            cause=e,
        ) from e
    return True
