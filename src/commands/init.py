"""Initialization command that writes a starter SportsPA config directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from ..core import config

LOGGER = logging.getLogger(__name__)

DEFAULT_ALIASES = {
    "am": "addm",
    "lm": "listm",
    "af": "addf",
    "lf": "listf",
}

ENV_TEMPLATE = """# SportsPA environment
# One of DEBUG, INFO, WARNING, ERROR
LOG_LEVEL=WARNING
"""


def confirm_overwrite(path: Path) -> bool:
    try:
        response = input(f"{path} already exists. Overwrite? (y/N): ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print("\nInitialization cancelled.")
        return False
    return response == "y"


def write_config_files(target: Path, *, force: bool = False) -> list[Path]:
    """Create ``target`` with a starter aliases.yaml and .env.

    Existing files are kept unless ``force`` is set or the user confirms.
    Returns the files that were written.
    """
    target.mkdir(parents=True, exist_ok=True)
    written = []

    aliases_path = target / config.ALIASES_FILE
    if force or not aliases_path.exists() or confirm_overwrite(aliases_path):
        aliases_path.write_text(
            yaml.safe_dump({"aliases": DEFAULT_ALIASES}, sort_keys=False),
            encoding="utf-8",
        )
        written.append(aliases_path)

    env_path = target / config.ENV_FILE_NAME
    if force or not env_path.exists() or confirm_overwrite(env_path):
        env_path.write_text(ENV_TEMPLATE, encoding="utf-8")
        written.append(env_path)

    return written


def run_init_command(args) -> int:
    explicit = args.config_dir or os.getenv(config.CONFIG_DIR_ENV)
    target = Path(explicit).expanduser() if explicit else config.DEFAULT_CONFIG_DIR
    try:
        written = write_config_files(target, force=args.force)
    except OSError as exc:
        LOGGER.error("Could not write config to %s: %s", target, exc)
        return 1

    for path in written:
        print(f"✓ Wrote {path}")
    if not written:
        print("Nothing written.")
    return 0
