"""Interactive collaborators: the message editor and the breaking-change prompt."""
from __future__ import annotations

from abc import ABC, abstractmethod

import click

BREAKING_CHANGE_PROMPT = "Describe briefly the breaking change (leave empty for no description): "


class Editor(ABC):
    """Something that lets the user rewrite a commit message."""

    @abstractmethod
    def edit(self, seed: str) -> str | None:
        """Return the edited text, or None if the user cancelled."""


class ClickEditor(Editor):
    """Opens the message in $VISUAL / $EDITOR through ``click.edit``.

    Quitting the editor without saving counts as cancellation.
    """

    def __init__(self, editor: str | None = None, extension: str = ".gitcommit"):
        self.editor = editor
        self.extension = extension

    def edit(self, seed: str) -> str | None:
        return click.edit(seed, editor=self.editor, require_save=True, extension=self.extension)


def prompt_breaking_change() -> str:
    """Ask for a one-line description. End of input yields an empty description."""
    click.echo(BREAKING_CHANGE_PROMPT, nl=False, err=True)
    line = click.get_text_stream("stdin").readline()
    if not line.endswith("\n"):
        click.echo(err=True)
    return line.strip()
