# progressview/helpers/_styles.py

# SECTION: MODULE DOCSTRING
"""Text decoration used when composing node labels and messages.

The tree builder only ever talks to a `Styler`. `PlainStyler` leaves text
untouched; `RichStyler` wraps it in Rich console markup so the result can be
printed by a Rich console or a Textual widget.
"""

# SECTION: IMPORTS
from typing import Any, Protocol

from rich.markup import escape


# KLASS: Styler
class Styler(Protocol):
    """Decorates substrings of generated messages.

    `text` marks undecorated content (labels, descriptions, addresses) so it
    survives whatever the decorated output is later parsed with.
    """

    def text(self, text: Any) -> str: ...

    def bold(self, text: Any) -> str: ...

    def blue(self, text: Any) -> str: ...

    def yellow(self, text: Any) -> str: ...


# KLASS: PlainStyler
class PlainStyler:
    """Pass-through styler: returns the text as a plain string."""

    def text(self, text: Any) -> str:
        return str(text)

    def bold(self, text: Any) -> str:
        return str(text)

    def blue(self, text: Any) -> str:
        return str(text)

    def yellow(self, text: Any) -> str:
        return str(text)

    def __repr__(self) -> str:
        return "PlainStyler()"


# KLASS: RichStyler
class RichStyler:
    """Styler that emits Rich markup tags around escaped text."""

    def __init__(self, blue: str = "blue", yellow: str = "yellow") -> None:
        self._blue = blue
        self._yellow = yellow

    def text(self, text: Any) -> str:
        return escape(str(text))

    @staticmethod
    def _wrap(style: str, text: Any) -> str:
        return f"[{style}]{escape(str(text))}[/{style}]"

    def bold(self, text: Any) -> str:
        return self._wrap("bold", text)

    def blue(self, text: Any) -> str:
        return self._wrap(self._blue, text)

    def yellow(self, text: Any) -> str:
        return self._wrap(self._yellow, text)

    def __repr__(self) -> str:
        return f"RichStyler(blue={self._blue!r}, yellow={self._yellow!r})"


PLAIN = PlainStyler()

__all__ = ["Styler", "PlainStyler", "RichStyler", "PLAIN"]
