"""Colorful CLI output helpers."""

import sys
from datetime import date

from ..models import Task

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗

PRIORITY_COLORS = {"high": RED, "medium": YELLOW, "low": GREEN}


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
        return False
    return True


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    check = _colorize(CHECK, GREEN)
    print(f"{check} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    bullet = _colorize(BULLET, YELLOW)
    print(f"{bullet} {message}")


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def error(message: str) -> None:
    """Print error message with red cross."""
    cross = _colorize(CROSS, RED)
    print(f"{cross} {message}", file=sys.stderr)


def format_task(task: Task, today: date | None = None) -> str:
    """One display line for a task.

    Example: "[x] 12       Buy milk  (high) due 2025-01-31 #home #errand"
    """
    box = "[x]" if task.completed else "[ ]"
    priority = _colorize(task.priority, PRIORITY_COLORS.get(task.priority, DIM))
    parts = [f"{box} {task.id:<8} {task.title}  ({priority})"]
    if task.due_date:
        due = f"due {task.due_date.isoformat()}"
        if task.is_overdue(today):
            due = _colorize(f"{due} overdue", RED)
        parts.append(due)
    if task.tags:
        parts.append(" ".join(f"#{tag}" for tag in task.tags))
    line = " ".join(parts)
    if task.description:
        line += "\n" + _colorize(f"      {task.description}", DIM)
    return line
