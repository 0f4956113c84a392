"""Startup banner."""

from rich.console import Console

BANNER = r"""
  ____             _     __     __          _ _
 |  _ \  _____   _| |____\ \   / /_ _ _   _| | |_
 | | | |/ _ \ \ / / |_____\ \ / / _` | | | | | __|
 | |_| |  __/\ V /| |      \ V / (_| | |_| | | |_
 |____/ \___| \_/ |_|       \_/ \__,_|\__,_|_|\__|
"""

TAGLINE = ">> The Developer's External Memory <<"


def print_banner(console: Console) -> None:
    """Print the ASCII art banner and tagline."""
    console.print(BANNER, style="bold bright_magenta", markup=False, highlight=False)
    console.print(TAGLINE, style="italic dim", markup=False, highlight=False)
    console.print("-" * 50, markup=False, highlight=False)
