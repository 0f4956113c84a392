"""System clipboard access through the platform's copy utility."""

import logging
import shutil
import subprocess
import sys

from devvault.core.exceptions import ClipboardError

logger = logging.getLogger(__name__)

# Tried in order; the first one found on PATH wins.
_COPY_COMMANDS = {
    "darwin": [["pbcopy"]],
    "win32": [["clip"]],
    "linux": [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
}


def find_copy_command(platform: str | None = None) -> list[str] | None:
    """Find a clipboard copy command available on this system."""
    platform = platform or sys.platform
    if platform.startswith("linux"):
        platform = "linux"

    for command in _COPY_COMMANDS.get(platform, []):
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str) -> None:
    """Copy text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard utility is available or it fails
    """
    command = find_copy_command()
    if command is None:
        raise ClipboardError(
            "No clipboard utility found (install pbcopy, wl-copy, xclip or xsel)"
        )

    logger.debug("Copying %d characters with %s", len(text), command[0])
    try:
        proc = subprocess.run(
            command,
            input=text.encode("utf-8"),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            timeout=5,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ClipboardError(f"Failed to copy to clipboard: {e}") from e

    if proc.returncode != 0:
        details = proc.stderr.decode("utf-8", errors="replace").strip()
        raise ClipboardError(
            f"Failed to copy to clipboard: {command[0]} exited with "
            f"{proc.returncode}" + (f" ({details})" if details else "")
        )
