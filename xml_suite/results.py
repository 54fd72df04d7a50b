"""Structured command results and their console rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape

INFO = "info"
SUCCESS = "success"
WARNING = "warning"
ERROR = "error"
FAILED = "failed"
HINT = "hint"
HEADING = "heading"

_STYLES = {
    INFO: ("", ""),
    SUCCESS: ("✅ ", "green"),
    WARNING: ("⚠️  ", "yellow"),
    ERROR: ("❌ ", "red"),
    FAILED: ("❌ ", "red"),
    HINT: ("💡 ", "dim"),
    HEADING: ("", "bold"),
}

_STDERR_LEVELS = (ERROR, HINT)


@dataclass
class Message:
    level: str
    text: str


@dataclass
class CommandResult:
    """What a command handler produced: messages to show and an exit code."""

    exit_code: int = 0
    messages: list[Message] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    def add(self, level: str, text: str = "") -> CommandResult:
        self.messages.append(Message(level, text))
        return self

    def info(self, text: str = "") -> CommandResult:
        return self.add(INFO, text)

    def success(self, text: str) -> CommandResult:
        return self.add(SUCCESS, text)

    def warning(self, text: str) -> CommandResult:
        return self.add(WARNING, text)

    def error(self, text: str) -> CommandResult:
        return self.add(ERROR, text)

    def failed(self, text: str) -> CommandResult:
        """A failing item inside an otherwise completed command."""
        return self.add(FAILED, text)

    def hint(self, text: str) -> CommandResult:
        return self.add(HINT, text)

    def heading(self, text: str) -> CommandResult:
        return self.add(HEADING, text)

    def fail(self, text: str, code: int = 1) -> CommandResult:
        self.exit_code = code
        return self.error(text)

    def texts(self, level: str | None = None) -> list[str]:
        return [m.text for m in self.messages if level is None or m.level == level]


def render(
    console: Console, result: CommandResult, err_console: Console | None = None,
) -> None:
    """Print every message of *result* in order.

    Command failures and hints go to *err_console* when one is given.
    """
    for msg in result.messages:
        prefix, style = _STYLES.get(msg.level, ("", ""))
        text = escape(f"{prefix}{msg.text}")
        out = err_console if err_console is not None and msg.level in _STDERR_LEVELS else console
        out.print(f"[{style}]{text}[/{style}]" if style else text)
