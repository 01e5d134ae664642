"""Printing utilities."""

from __future__ import annotations

import importlib
import os
from enum import Enum
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from matsubara import __version__

if TYPE_CHECKING:
    from typing import Any, Iterable


theme = Theme(
    {
        "good": "green",
        "okay": "yellow",
        "bad": "red",
        "output": "cyan",
        "input": "bright_magenta",
        "method": "bold underline",
        "header": "bold",
    }
)

console = Console(
    highlight=False,
    theme=theme,
    log_path=False,
    quiet=os.environ.get("MATSUBARA_QUIET", "").lower() in ("1", "true"),
)

HEADER = r"""                 _                 _
 _ __ ___   __ _| |_ ___ _   _| |__   __ _ _ __ __ _
| '_ ` _ \ / _` | __/ __| | | | '_ \ / _` | '__/ _` |
| | | | | | (_| | |_\__ \ |_| | |_) | (_| | | | (_| |
|_| |_| |_|\__,_|\__|___/\__,_|_.__/ \__,_|_|  \__,_|
                                           %s
"""


def init_console() -> None:
    """Initialise the console with a header."""
    if globals().get("_MATSUBARA_LOG_INITIALISED", False):
        return

    # Print header
    header_with_version = "[header]" + HEADER + "[/header]"
    header_with_version %= " " * (10 - len(__version__)) + "[input]" + __version__ + "[/input]"
    console.print(header_with_version)

    # Print versions of dependencies
    for name in ["numpy", "scipy", "matsubara"]:
        module = importlib.import_module(name)
        console.print(f"{name}:")
        console.print(f" > Version:  [input]{module.__version__}[/]")

    console.print(
        "MATSUBARA_FFT_BACKEND = [input]%s[/]" % os.environ.get("MATSUBARA_FFT_BACKEND", "")
    )

    globals()["_MATSUBARA_LOG_INITIALISED"] = True


class Quiet:
    """Context manager to disable console output."""

    def __init__(self, console: Console = console):
        """Initialise the object."""
        self._memo: list[bool] = []
        self._console = console

    def __enter__(self) -> None:
        """Enter the context manager."""
        self._memo.append(self.console.quiet)
        self.console.quiet = True

    def __exit__(self, *args: Any) -> None:
        """Exit the context manager."""
        quiet = self._memo.pop()
        self.console.quiet = quiet

    @property
    def console(self) -> Console:
        """Get the console."""
        return self._console


quiet = Quiet(console)


def format_float(value: float, precision: int = 10) -> str:
    """Format a float to a string with a given precision.

    Args:
        value: The value to format.
        precision: The number of decimal places to include.

    Returns:
        str: The formatted string.
    """
    return f"{value:.{precision}f}"


def print_options(
    name: str, options: Iterable[tuple[str, Any]], console: Console = console
) -> None:
    """Print the name of a transform and a table of its options.

    Args:
        name: Name of the transform.
        options: Pairs of option names and values.
        console: Console to print to.
    """
    init_console()
    console.print("")
    console.print(f"[method]{name}[/method]")

    table = Table(box=box.SIMPLE)
    table.add_column("Option")
    table.add_column("Value", style="input")
    for key, value in options:
        if isinstance(value, Enum):
            text = str(value.value)
        elif isinstance(value, float):
            text = format_float(value, precision=6)
        else:
            text = str(value)
        table.add_row(key, text)
    console.print(table)
