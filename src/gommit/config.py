"""Configuration loading and parsing for Gommit."""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from gommit.rules import rule_names

logger = logging.getLogger("gommit")

CONFIG_FILENAMES = ["gommit.conf.yaml", "gommit.conf.yml"]
CONFIG_DIR = ".gommit"
CONFIG_ENV_VAR = "GOMMIT_CONFIG"

DEFAULT_HEADER_MAX_LENGTH = 50
DEFAULT_BODY_LINE_MAX_LENGTH = 72
DEFAULT_ALLOWED_TYPES = (
    "feat", "fix", "docs", "style", "refactor", "perf",
    "test", "build", "ci", "chore", "revert",
)


class ConfigError(Exception):
    """Raised when a config file exists but cannot be read or parsed."""


@dataclass(frozen=True)
class GommitConfig:
    """Validation settings, read-only for a whole run."""
    disabled_rules: frozenset[str] = field(default_factory=frozenset)
    header_max_length: int = DEFAULT_HEADER_MAX_LENGTH
    body_line_max_length: int = DEFAULT_BODY_LINE_MAX_LENGTH
    allowed_types: tuple[str, ...] = DEFAULT_ALLOWED_TYPES
    source: Path | None = None

    def is_rule_enabled(self, rule_id: str) -> bool:
        return rule_id not in self.disabled_rules


def executable_dir() -> Path:
    """Directory holding the running gommit script."""
    return Path(sys.argv[0]).resolve().parent


def candidate_paths(explicit: str | None = None, cwd: str | None = None) -> list[Path]:
    """Ordered config file candidates; the first existing one wins."""
    candidates: list[Path] = []
    if explicit:
        candidates.append(Path(explicit).expanduser())

    search_dirs = [executable_dir(), Path(cwd or os.getcwd()) / CONFIG_DIR]
    for directory in search_dirs:
        for filename in CONFIG_FILENAMES:
            candidates.append(directory / filename)
    return candidates


def _positive_int(raw: dict, key: str, default: int) -> int:
    value = raw.get(key)
    if value is None or value == 0:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        logger.warning("Invalid %s %r, falling back to %d", key, value, default)
        return default
    return value


def _string_list(raw: dict, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = raw.get(key)
    if not value:
        return default
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        logger.warning("Invalid %s %r, expected a list of strings", key, value)
        return default
    return tuple(value)


def parse_config(raw: dict, source: Path | None = None) -> GommitConfig:
    """Build a config from parsed YAML, substituting defaults for missing fields."""
    disabled = _string_list(raw, "disabled_rules", ())
    known = set(rule_names())
    for name in disabled:
        if name not in known:
            logger.warning("Unknown rule '%s' in disabled_rules", name)

    return GommitConfig(
        disabled_rules=frozenset(disabled),
        header_max_length=_positive_int(raw, "header_max_length", DEFAULT_HEADER_MAX_LENGTH),
        body_line_max_length=_positive_int(raw, "body_line_max_length", DEFAULT_BODY_LINE_MAX_LENGTH),
        allowed_types=_string_list(raw, "allowed_types", DEFAULT_ALLOWED_TYPES),
        source=source,
    )


def read_config_file(path: Path) -> dict:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"error reading config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"error parsing config file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return raw


def load_config(explicit: str | None = None, cwd: str | None = None) -> GommitConfig:
    """Load config from the first existing candidate file, or use defaults.

    An explicit path (argument or GOMMIT_CONFIG) must exist.
    """
    explicit = explicit or os.environ.get(CONFIG_ENV_VAR)
    if explicit and not Path(explicit).expanduser().is_file():
        raise ConfigError(f"config file {explicit} does not exist")

    for path in candidate_paths(explicit, cwd):
        if path.is_file():
            logger.debug("Loading config from %s", path)
            return parse_config(read_config_file(path), source=path)

    logger.debug("No config file found, using defaults")
    return GommitConfig()
