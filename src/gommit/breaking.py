"""BREAKING CHANGE trailer injection."""
from __future__ import annotations

BREAKING_CHANGE_TOKEN = "BREAKING CHANGE"


def append_breaking_change(message: str, description: str) -> str:
    """Append a ``BREAKING CHANGE: <description>`` trailer after one blank line.

    The description may be empty. The result is not re-validated here.
    """
    footer = f"{BREAKING_CHANGE_TOKEN}: {description}"
    return f"{message.rstrip()}\n\n{footer}".strip()
