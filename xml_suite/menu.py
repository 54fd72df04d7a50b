"""Interactive menu shown when xml-suite runs without a subcommand.

Each choice calls the same handler the CLI command uses, in-process.
"""

from __future__ import annotations

import logging
from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from . import __version__, commands
from .results import CommandResult, render

log = logging.getLogger(__name__)

MENU_ITEMS = [
    ("1", "Generate Schema", "Create XSD from existing filters"),
    ("2", "Create Filter", "Generate filter from intermediate"),
    ("3", "Validate Filters", "Check all SampleFilters vs XSD"),
    ("Q", "Quit", "Exit application"),
]

QUIT_CHOICES = ("q", "quit")


class InteractiveMenu:
    """Prompt loop over the schema / create / validate handlers.

    ``prompt`` reads one line and returns it, or None on end of input.
    ``handlers`` maps ``schema``, ``create`` and ``validate`` to callables
    returning a ``CommandResult``; tests swap these out.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        prompt: Callable[[str], str | None] | None = None,
        handlers: dict[str, Callable[..., CommandResult]] | None = None,
    ):
        self.console = console or Console()
        self.err_console = err_console
        self.prompt = prompt or self._console_prompt
        self.handlers = handlers or {
            "schema": commands.run_schema,
            "create": commands.run_create,
            "validate": commands.run_validate,
        }
        self.last_exit_code = 0

    def _console_prompt(self, question: str) -> str | None:
        try:
            return self.console.input(question)
        except (KeyboardInterrupt, EOFError):
            self.console.print()
            return None

    def _ask(self, question: str) -> str | None:
        answer = self.prompt(question)
        return None if answer is None else answer.strip()

    def show(self) -> None:
        self.console.clear()
        self.console.print(Panel.fit(
            f"[bold blue]XML Suite v{__version__}[/bold blue]\n"
            "Last Epoch Loot Filter Suite",
        ))
        self.console.print()
        lines = [
            f"[bold]{escape(f'[{key}]')}[/bold] {name:<18} [dim]{desc}[/dim]"
            for key, name, desc in MENU_ITEMS
        ]
        self.console.print(Panel("\n".join(lines), title="XML Suite Menu", expand=False))
        self.console.print()

    def _run(self, name: str, banner: str, **kwargs) -> None:
        self.console.print(f"\n{banner}\n")
        log.info("Menu running %s", name)
        result = self.handlers[name](**kwargs)
        render(self.console, result, self.err_console)
        self.last_exit_code = result.exit_code

    def handle_choice(self, choice: str) -> bool:
        """Act on one menu choice. Returns False when the menu should exit."""
        choice = choice.strip().lower()

        if choice in QUIT_CHOICES:
            self.console.print("\n👋 Thanks for using XML Suite!")
            return False

        if choice == "1":
            self._run("schema", "🔧 Running Schema Generation...")
        elif choice == "2":
            path = self._ask("Enter intermediate JSON file path: ")
            if path is None:
                return False
            if path:
                self._run("create", "⚡ Running Filter Creation...", intermediate=path)
            else:
                self.console.print("[red]❌ Operation cancelled.[/red]")
        elif choice == "3":
            self._run("validate", "✅ Running Filter Validation...")
        else:
            self.console.print("[red]❌ Invalid option. Please try again.[/red]")
        return True

    def run(self) -> None:
        """Loop until the user quits or input ends."""
        while True:
            self.show()
            choice = self._ask("Select option: ")
            if choice is None or not self.handle_choice(choice):
                break
            self.console.print()
            if self._ask("Press Enter to return to menu...") is None:
                break
        log.info("Menu closed, last command exit code %d", self.last_exit_code)
