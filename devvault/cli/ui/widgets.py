"""Status icons used in CLI messages."""


class StatusIcon:
    """Status icon constants."""

    SUCCESS = "[green]✓[/green]"
    ERROR = "[red]✗[/red]"
    WARNING = "[yellow]⚠[/yellow]"
    INFO = "[blue]ℹ[/blue]"
    SEARCH = "[blue]🔍[/blue]"
    REMOVED = "[red]🗑[/red]"
