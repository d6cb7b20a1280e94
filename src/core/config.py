"""Configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

import yaml
from dotenv import load_dotenv

from .errors import ConfigError, ParseError
from .parsing.fields import parse_command_word, parse_shortcut
from .values import COMMAND_WORDS, CommandWord, Shortcut

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("~/.sportspa").expanduser()
CONFIG_DIR_ENV = "SPORTSPA_CONFIG_DIR"
ENV_FILE_NAME = ".env"
ALIASES_FILE = "aliases.yaml"


@dataclass
class Config:
    config_dir: Path | None = None
    aliases: Dict[Shortcut, CommandWord] = field(default_factory=dict)
    log_level: str = "WARNING"


def resolve_config_dir(config_dir: Path | str | None) -> Path | None:
    """Resolve the directory holding .env and aliases.yaml.

    An explicitly requested directory must exist. The default directory is
    optional; None is returned when it is missing.
    """
    explicit = config_dir or os.getenv(CONFIG_DIR_ENV)
    if not explicit:
        if not DEFAULT_CONFIG_DIR.is_dir():
            LOGGER.warning("No config directory at %s; using defaults.", DEFAULT_CONFIG_DIR)
            return None
        return DEFAULT_CONFIG_DIR.resolve()

    target = Path(explicit).expanduser().resolve()
    if not target.exists():
        raise ConfigError(f"Config directory {target} does not exist")
    if not target.is_dir():
        raise ConfigError(f"Config directory {target} is not a directory")
    return target


def load_config(config_dir: Path | str | None = None) -> Config:
    """Load SportsPA configuration from the provided or default directory."""
    root = resolve_config_dir(config_dir)
    if root is None:
        return Config(log_level=_log_level())

    _load_env_file(root / ENV_FILE_NAME)
    return Config(
        config_dir=root,
        aliases=_load_aliases(root / ALIASES_FILE),
        log_level=_log_level(),
    )


def _load_env_file(path: Path) -> None:
    if not path.exists():
        LOGGER.debug("No .env file found at %s; relying on shell environment.", path)
        return
    load_dotenv(dotenv_path=path, override=False)


def _log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "WARNING").upper()


def _load_aliases(path: Path) -> Dict[Shortcut, CommandWord]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid aliases.yaml structure at {path}")

    raw_aliases = data.get("aliases") or {}
    if not isinstance(raw_aliases, dict):
        raise ConfigError(f"aliases in {path} must be a mapping")

    aliases = {}
    for raw_shortcut, raw_word in raw_aliases.items():
        try:
            shortcut = parse_shortcut(str(raw_shortcut))
            command_word = parse_command_word(str(raw_word))
        except ParseError as exc:
            raise ConfigError(f"Invalid alias {raw_shortcut!r} -> {raw_word!r}: {exc.message}") from exc
        if shortcut.value in COMMAND_WORDS:
            raise ConfigError(f"Alias {shortcut} shadows a built-in command word")
        aliases[shortcut] = command_word
    LOGGER.info("Loaded %s alias(es) from %s", len(aliases), path)
    return aliases
