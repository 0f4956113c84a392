"""Status lines printed by the snippet commands.

Handler results carry their own status, so most output goes through
``report_result``, which picks the icon and color from the status. User
text is escaped so keys and commands print verbatim.
"""

from rich.console import Console
from rich.markup import escape

from devvault.operations.results import OperationResult, ResultStatus

from .widgets import StatusIcon

LEVELS = {
    "success": (StatusIcon.SUCCESS, "green"),
    "error": (StatusIcon.ERROR, "red"),
    "warning": (StatusIcon.WARNING, "yellow"),
    "info": (StatusIcon.INFO, "blue"),
}

STATUS_LEVELS = {
    ResultStatus.SUCCESS: "success",
    ResultStatus.DRY_RUN: "info",
    ResultStatus.NOT_FOUND: "warning",
    ResultStatus.CONFLICT: "error",
    ResultStatus.VALIDATION_FAILED: "error",
    ResultStatus.ERROR: "error",
}


def notify(console: Console, message: str, level: str = "info") -> None:
    """Print one status line.

    Args:
        console: Rich console instance
        message: Plain message text, printed verbatim
        level: One of ``success``, ``error``, ``warning`` or ``info``
    """
    icon, style = LEVELS[level]
    console.print(f"{icon} {escape(message)}", style=style)


def report_result(console: Console, result: OperationResult) -> None:
    """Print a handler result's message followed by any error details."""
    notify(console, result.message, STATUS_LEVELS[result.status])
    for error in result.errors or []:
        console.print(f"  - {escape(error)}", highlight=False, soft_wrap=True)
