"""Interactive demo: the action menu, the intro form answers and the actions."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

MENU_TITLE = "EHRPlus CLI Demo"
ACTION_DELAY = 2.0
DEFAULT_DB_PATH = "demo.db"
SPINNER_FRAMES = ("⣾ ", "⣽ ", "⣻ ", "⢿ ", "⡿ ", "⣟ ", "⣯ ", "⣷ ")
ENVIRONMENTS = (
    ("Development", "dev"),
    ("Staging", "staging"),
    ("Production", "prod"),
)


@dataclass(frozen=True)
class MenuItem:
    """One entry of the demo menu."""

    title: str
    description: str


def demo_items() -> list[MenuItem]:
    """The entries offered by the demo menu, in display order."""
    return [
        MenuItem("Database Demo", "Test SQLite database operations with GORM"),
        MenuItem("SSH Demo", "Simulate SSH connection handling"),
        MenuItem("Form Demo", "Show interactive form capabilities"),
        MenuItem("Styling Demo", "Demonstrate Lipgloss styling features"),
    ]


@dataclass
class DemoMenu:
    """State of the demo menu screen."""

    items: list[MenuItem] = field(default_factory=demo_items)
    cursor: int = 0
    loading: bool = False
    choice: str = ""
    quitting: bool = False
    exited: bool = False
    spinner: str = SPINNER_FRAMES[0]

    def update(self, key: str) -> str | None:
        """Handle a key press; return the title of an action to start, if any."""
        if key == "ctrl+c":
            self.quitting = True
            self.exited = True
            return None
        if key == "enter":
            if self.items:
                self.choice = self.items[self.cursor].title
                return self.choice
            return None
        if key in ("q", "esc"):
            self.exited = True
        elif key in ("up", "k"):
            self.cursor = max(self.cursor - 1, 0)
        elif key in ("down", "j"):
            self.cursor = min(self.cursor + 1, max(len(self.items) - 1, 0))
        elif key in ("home", "g"):
            self.cursor = 0
        elif key in ("end", "G"):
            self.cursor = max(len(self.items) - 1, 0)
        return None

    def finish_action(self) -> None:
        """Mark the running action as done."""
        self.loading = False

    def _list_view(self) -> str:
        lines = [f" {MENU_TITLE} ", ""]
        for index, item in enumerate(self.items):
            marker = "│ " if index == self.cursor else "  "
            lines += [f"{marker}{item.title}", f"{marker}{item.description}", ""]
        lines.append("    ↑/k up • ↓/j down • q quit")
        return "\n".join(lines) + "\n"

    def view(self) -> str:
        if self.quitting:
            return "\n  Goodbye!\n"
        if self.loading:
            return f"\n\n   {self.spinner} Loading {self.choice}...\n\n"
        if self.choice:
            return (
                f"\n  ✓ {self.choice} completed successfully!\n\n"
                "  Press any key to return to menu or Ctrl+C to exit.\n"
            )
        return "\n" + self._list_view()


@dataclass(frozen=True)
class FormAnswers:
    """Answers given to the introductory form."""

    name: str = ""
    environment: str = ""
    confirm: bool = False


def greeting(answers: FormAnswers) -> str:
    """The line printed after the introductory form."""
    if not answers.confirm:
        return "Demo cancelled."
    return f"Hello {answers.name}! Running demo in {answers.environment} environment."


def perform_action(action: str, db_path: str = DEFAULT_DB_PATH) -> str | None:
    """Run a demo action and return the message it logged, if any."""
    if action == "Database Demo":
        try:
            with closing(sqlite3.connect(db_path)) as conn, conn:
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS users "
                    "(id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT)"
                )
                conn.execute("INSERT INTO users (name) VALUES (?)", ("Demo User",))
        except sqlite3.Error as exc:
            message = f"Failed to connect database: {exc}"
        else:
            message = "Database demo completed"
    elif action == "SSH Demo":
        message = "SSH demo - connection simulation completed"
    elif action == "Form Demo":
        message = "Form demo completed"
    else:
        return None
    logger.info(message)
    return message