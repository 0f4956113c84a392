"""UI components for the CLI: status messages and the startup banner."""

from .banner import print_banner
from .messages import notify, report_result
from .widgets import StatusIcon

__all__ = [
    "StatusIcon",
    "notify",
    "print_banner",
    "report_result",
]
