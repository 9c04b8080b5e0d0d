"""ANSI colors for terminal output."""

from __future__ import annotations


class Colors:
    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[1;36m"
    RESET = "\033[0m"


class Painter:
    """Wraps text in color codes, or leaves it alone when disabled."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def _wrap(self, code: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"{code}{text}{Colors.RESET}"

    def red(self, text: str) -> str:
        return self._wrap(Colors.RED, text)

    def green(self, text: str) -> str:
        return self._wrap(Colors.GREEN, text)

    def yellow(self, text: str) -> str:
        return self._wrap(Colors.YELLOW, text)

    def cyan(self, text: str) -> str:
        return self._wrap(Colors.CYAN, text)
