"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, Sequence, TextIO

from .core import CommandError, Config, ConfigError, ParseError, Router, load_config

LOGGER = logging.getLogger(__name__)

PROMPT = "sportspa> "
WELCOME = "Welcome to SportsPA! Type `help` to see the available commands."


def cli(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="sportspa",
        description="SportsPA - manage club members and facilities from the command line",
    )
    parser.add_argument(
        "--config-dir",
        help="Directory holding .env and aliases.yaml (default: ~/.sportspa)",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        dest="commands",
        metavar="COMMAND",
        help="Run COMMAND and exit instead of starting the interactive prompt (repeatable)",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")
    init_parser = subparsers.add_parser(
        "init",
        help="Write a starter configuration directory",
    )
    init_parser.add_argument(
        "--config-dir",
        default=argparse.SUPPRESS,
        help="Directory to write (default: $SPORTSPA_CONFIG_DIR or ~/.sportspa)",
    )
    init_parser.add_argument("--force", action="store_true", help="Overwrite existing files")

    args = parser.parse_args(argv)

    if args.subcommand == "init":
        from .commands import run_init_command

        return run_init_command(args)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config: Config = load_config(args.config_dir)
    except ConfigError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1

    log_level = getattr(logging, config.log_level, logging.WARNING)
    logging.getLogger().setLevel(log_level)
    LOGGER.info("Loaded %s alias(es)", len(config.aliases))

    router = Router(config)
    try:
        if args.commands:
            run_commands(router, args.commands, sys.stdout)
        else:
            print(WELCOME)
            run_repl(router, _read_lines(), sys.stdout)
    except KeyboardInterrupt:
        LOGGER.info("Interrupted by user")
        return 130
    return 0


def _read_lines(prompt: str = PROMPT, reader: Callable[[str], str] = input) -> Iterable[str]:
    while True:
        try:
            yield reader(prompt)
        except EOFError:
            return


def run_commands(router: Router, lines: Iterable[str], out: TextIO) -> bool:
    """Execute each line, printing feedback or the error message.

    Returns True once an exit command has run.
    """
    for line in lines:
        if not line.strip():
            continue
        try:
            result = router.handle_input(line)
        except (ParseError, CommandError) as exc:
            print(exc.message, file=out)
            continue

        print(result.feedback, file=out)
        if result.show_help:
            print("\n".join(router.dispatcher.build_help_lines()), file=out)
        if result.exit:
            return True
    return False


def run_repl(router: Router, lines: Iterable[str], out: TextIO) -> None:
    run_commands(router, lines, out)
    LOGGER.info("Session finished")


if __name__ == "__main__":
    raise SystemExit(cli())
