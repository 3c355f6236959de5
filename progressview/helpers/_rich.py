# progressview/helpers/_rich.py

# SECTION: MODULE DOCSTRING
"""Initializes the themed Rich Console shared by the CLI and renderers.

Exports the configured `console` and a `print` wrapper bound to it. Also
installs Rich tracebacks on that console.
"""

# SECTION: IMPORTS
from typing import Any

from rich.console import Console
from rich.theme import Theme
from rich.traceback import install as install_traceback

# SECTION: THEME
DEFAULT_THEME_DICT = {
    "debug": "dim #908caa",
    "dim": "dim",
    "disabled": "dim #6e6a86",
    "error": "bold #f38ba8",
    "highlight": "bold #eb6f92",
    "info": "bold #cba6f7",
    "label": "bold #e0def4",
    "rp_foam": "#9ccfd8",
    "rp_gold": "#f6c177",
    "rp_iris": "#c4a7e7",
    "subtle": "dim #908caa",
    "success": "bold #a6e3a1",
    "table.header": "bold #cba6f7",
    "tree.line": "#45475A",
    "warning": "bold #f6c177",
}

progress_theme = Theme(DEFAULT_THEME_DICT)

console: Console = Console(
    theme=progress_theme,
    color_system="auto",
    highlight=False,
    emoji=False,
)

# SECTION: PRETTY TRACEBACKS
install_traceback(console=console, show_locals=False, word_wrap=True)

_themed_print = console.print


# FUNC: print
def print(*args: Any, **kwargs: Any) -> None:
    """Prints to the configured Rich console using the loaded theme."""
    _themed_print(*args, **kwargs)


__all__ = ["console", "print", "progress_theme"]
