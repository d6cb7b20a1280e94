"""Turns a raw input line into a command using the central registry."""

from __future__ import annotations

import logging
import re
from typing import Dict, Mapping, Optional, Sequence

from ..errors import FormatError, UnknownCommandError
from .base import Command
from .general import HelpCommand
from .registry import CommandSpec, iter_command_specs

LOGGER = logging.getLogger(__name__)

BASIC_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


class CommandDispatcher:
    """Maps command words (or their aliases) to parsers."""

    def __init__(self, specs: Optional[Sequence[CommandSpec]] = None) -> None:
        self._specs: Sequence[CommandSpec] = tuple(specs or iter_command_specs())
        self._lookup: Dict[str, CommandSpec] = {spec.name: spec for spec in self._specs}

    @property
    def specs(self) -> Sequence[CommandSpec]:
        return self._specs

    def get_spec(self, name: str) -> Optional[CommandSpec]:
        return self._lookup.get(name)

    def parse_command(self, user_input: str, aliases: Optional[Mapping[str, str]] = None) -> Command:
        """Parse ``user_input`` such as ``addf n/Court 1 ...`` into a command.

        Built-in command words take precedence over aliases.
        """

        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if not match:
            raise FormatError(HelpCommand.MESSAGE_USAGE)

        word = match.group("word")
        arguments = match.group("arguments")

        spec = self._lookup.get(word)
        if spec is None and aliases and word in aliases:
            LOGGER.debug("Resolved alias %s to %s", word, aliases[word])
            spec = self._lookup.get(aliases[word])
        if spec is None:
            raise UnknownCommandError()

        command = spec.parse(arguments)
        LOGGER.debug("Parsed %s into %r", word, command)
        return command

    def build_help_lines(self) -> list[str]:
        """Render help text for all commands."""

        lines = ["Available commands:"]
        for spec in self._specs:
            lines.append(f"- `{spec.usage_line()}` – {spec.description}")
        lines.append("")
        lines.append("Prefix values may be given in any order; a repeated prefix keeps its last value.")
        return lines
