"""Text styling for terminal output.

The renderer only talks to a :class:`Styler`; :class:`RichStyler` produces
``rich`` console markup and :class:`PlainStyler` leaves text untouched.
"""

from __future__ import annotations

from typing import Protocol

from rich.markup import escape


class Styler(Protocol):
    def plain(self, text: str) -> str: ...

    def emphasize(self, text: str) -> str: ...

    def accent(self, text: str) -> str: ...

    def positive(self, text: str) -> str: ...

    def measure(self, text: str) -> str: ...

    def notice(self, text: str) -> str: ...

    def warn(self, text: str) -> str: ...

    def feel(self, text: str, label: str) -> str: ...


class PlainStyler:
    """No-op styler for tests and non-terminal output."""

    def plain(self, text: str) -> str:
        return text

    def emphasize(self, text: str) -> str:
        return text

    def accent(self, text: str) -> str:
        return text

    def positive(self, text: str) -> str:
        return text

    def measure(self, text: str) -> str:
        return text

    def notice(self, text: str) -> str:
        return text

    def warn(self, text: str) -> str:
        return text

    def feel(self, text: str, label: str) -> str:
        return text


FEEL_STYLES: dict[str, str] = {
    "Very Hot": "bright_red",
    "Hot": "red",
    "Warm": "yellow",
    "Cool": "blue",
    "Cold": "bright_blue",
    "Very Cold": "bright_cyan",
}


class RichStyler:
    """Wraps text in rich console markup, escaping any markup in the text."""

    @staticmethod
    def _wrap(style: str, text: str) -> str:
        return f"[{style}]{escape(text)}[/{style}]"

    def plain(self, text: str) -> str:
        return escape(text)

    def emphasize(self, text: str) -> str:
        return self._wrap("bold yellow", text)

    def accent(self, text: str) -> str:
        return self._wrap("cyan", text)

    def positive(self, text: str) -> str:
        return self._wrap("green", text)

    def measure(self, text: str) -> str:
        return self._wrap("bright_magenta", text)

    def notice(self, text: str) -> str:
        return self._wrap("blue", text)

    def warn(self, text: str) -> str:
        return self._wrap("bright_red", text)

    def feel(self, text: str, label: str) -> str:
        return self._wrap(FEEL_STYLES.get(label, "default"), text)
