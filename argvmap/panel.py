"""Rich-based terminal output for errors and available arguments."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from argvmap.core import parse_names

if TYPE_CHECKING:
    from rich.console import Console
    from rich.panel import Panel

    from argvmap.exceptions import ArgvError
    from argvmap.registry import Registry


def ArgvPanel(message: Any, title: str = "Error", style: str = "red") -> "Panel":  # noqa: N802
    """Rounded :class:`~rich.panel.Panel` wrapping the stringified ``message``."""
    from rich import box
    from rich.panel import Panel
    from rich.text import Text

    return Panel(
        Text(str(message), "default"),
        title=title,
        style=style,
        box=box.ROUNDED,
        expand=True,
        title_align="left",
    )


def _stderr_console() -> "Console":
    from rich.console import Console

    return Console(stderr=True)


def print_error(error: "ArgvError", console: "Console | None" = None) -> None:
    """Display ``error`` in a red panel (stderr by default)."""
    if console is None:
        console = _stderr_console()
    console.print(ArgvPanel(error))


def format_available(names: Iterable[str]) -> str:
    """Join argument names into a single usage line.

    Example
    -------
    >>> format_available(["CN", "OU"])
    'Available args: CN, OU'
    """
    return "Available args: " + ", ".join(names)


def print_available(dest: Any, console: "Console | None" = None, *, registry: "Registry | None" = None) -> None:
    """Display every argument name ``dest`` accepts."""
    from rich.console import Console

    if console is None:
        console = Console()
    console.print(ArgvPanel(format_available(parse_names(dest, registry=registry)), title="Usage", style="default"))
