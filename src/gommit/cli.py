"""Gommit CLI entry point."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from gommit.config import (
    CONFIG_DIR,
    CONFIG_FILENAMES,
    DEFAULT_ALLOWED_TYPES,
    DEFAULT_BODY_LINE_MAX_LENGTH,
    DEFAULT_HEADER_MAX_LENGTH,
    ConfigError,
    GommitConfig,
    load_config,
)
from gommit.editor import ClickEditor, prompt_breaking_change
from gommit.repair import RepairError, RepairLoop, RepairOutcome, StillInvalidError
from gommit.reporter import Palette, Reporter
from gommit.rules import RULE_CATALOG
from gommit.store import read_message, scratch_message_file, write_message

logger = logging.getLogger("gommit")


def _configure_logging() -> None:
    level = os.environ.get("GOMMIT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


def _repair_file(path: Path, config: GommitConfig, reporter: Reporter) -> RepairOutcome:
    """Run one repair cycle on ``path`` and write the result back once."""
    original = read_message(path)

    def report(violations):
        click.echo(reporter.format_violations(violations), err=True)
        click.echo(reporter.format_edit_hint(), err=True)

    loop = RepairLoop(
        config=config,
        editor=ClickEditor(),
        prompt=prompt_breaking_change,
        on_violations=report,
    )
    outcome = loop.run(original)
    write_message(path, outcome.message)
    return outcome


@click.group()
def main():
    """Gommit - conventional commit message checker for git hooks."""
    _configure_logging()


@main.command()
@click.argument("msg_file", required=False, type=click.Path(dir_okay=False))
@click.option("--config", "config_path", default=None, help="Path to a gommit.conf.yaml file")
@click.option("--no-color", is_flag=True, help="Disable colored output")
def check(msg_file: str | None, config_path: str | None, no_color: bool):
    """Check (and interactively repair) a commit message file.

    Without MSG_FILE the message is read from stdin.
    """
    reporter = Reporter(Palette(enabled=not no_color))

    try:
        config = load_config(config_path)
        if msg_file:
            outcome = _repair_file(Path(msg_file), config, reporter)
        else:
            click.echo("No file provided. Enter your commit message (Ctrl+D when finished):", err=True)
            content = click.get_text_stream("stdin").read()
            with scratch_message_file(content) as path:
                outcome = _repair_file(path, config, reporter)
    except StillInvalidError as exc:
        click.echo(reporter.format_failure(str(exc), exc.violations), err=True)
        sys.exit(1)
    except (RepairError, ConfigError, OSError, UnicodeDecodeError) as exc:
        click.echo(reporter.format_failure(str(exc)), err=True)
        sys.exit(1)

    if outcome.breaking_change_added:
        click.echo(reporter.format_note("Added a BREAKING CHANGE trailer."))
    if outcome.edited:
        click.echo(reporter.format_note("Commit message was rewritten in the editor."))
    click.echo(reporter.format_success(outcome.message))


@main.command("list-rules")
@click.option("--config", "config_path", default=None, help="Path to a gommit.conf.yaml file")
def list_rules(config_path: str | None):
    """List all rules and whether the active config enables them."""
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)

    click.echo(Reporter(Palette(enabled=False)).format_catalog(RULE_CATALOG, config))


@main.command()
@click.option("--project-dir", default=None, help="Project directory")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(project_dir: str | None, force: bool):
    """Write a default Gommit config to .gommit/gommit.conf.yaml."""
    project_dir = project_dir or os.getcwd()
    config_path = Path(project_dir) / CONFIG_DIR / CONFIG_FILENAMES[0]

    if config_path.exists() and not force:
        click.echo(f"{config_path} already exists (use --force to overwrite).", err=True)
        sys.exit(1)

    type_lines = "\n".join(f"  - {t}" for t in DEFAULT_ALLOWED_TYPES)
    config_content = f"""# Gommit Configuration

header_max_length: {DEFAULT_HEADER_MAX_LENGTH}
body_line_max_length: {DEFAULT_BODY_LINE_MAX_LENGTH}

allowed_types:
{type_lines}

disabled_rules: []
  # - header-lowercase
  # - auto-breaking-change
"""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config_content, encoding="utf-8")

    click.echo(f"Created {config_path}")


if __name__ == "__main__":
    main()
