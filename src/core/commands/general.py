"""Alias management and application-level commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..address_book import AddressBook
from ..errors import CommandError
from ..values import COMMAND_WORDS, CommandWord, Shortcut
from .base import Command, CommandResult

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasCommand(Command):
    shortcut: Shortcut
    command_word: CommandWord

    COMMAND_WORD = "alias"
    MESSAGE_USAGE = (
        "alias: Creates a shortcut for a command word.\n"
        "Parameters: s/SHORTCUT cw/COMMAND_WORD\n"
        "Example: alias s/lf cw/listf"
    )
    MESSAGE_SUCCESS = "Created alias {} for {}"
    MESSAGE_RESERVED = "{} is already a command word and cannot be used as a shortcut"

    def execute(self, book: AddressBook) -> CommandResult:
        if self.shortcut.value in COMMAND_WORDS:
            raise CommandError(self.MESSAGE_RESERVED.format(self.shortcut))
        book.add_alias(self.shortcut, self.command_word)
        LOGGER.info("Aliased %s to %s", self.shortcut, self.command_word)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.shortcut, self.command_word))


@dataclass(frozen=True)
class UnaliasCommand(Command):
    shortcut: Shortcut

    COMMAND_WORD = "unalias"
    MESSAGE_USAGE = (
        "unalias: Removes a previously created shortcut.\n"
        "Parameters: SHORTCUT\n"
        "Example: unalias lf"
    )
    MESSAGE_SUCCESS = "Removed alias {}"
    MESSAGE_UNKNOWN = "{} is not an existing alias"

    def execute(self, book: AddressBook) -> CommandResult:
        if not book.remove_alias(self.shortcut):
            raise CommandError(self.MESSAGE_UNKNOWN.format(self.shortcut))
        LOGGER.info("Removed alias %s", self.shortcut)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.shortcut))


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Removes all members and facilities.\nExample: clear"
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, book: AddressBook) -> CommandResult:
        book.clear()
        LOGGER.info("Cleared address book")
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows the list of commands.\nExample: help"
    MESSAGE_SUCCESS = "Showing help."

    def execute(self, book: AddressBook) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program.\nExample: exit"
    MESSAGE_SUCCESS = "Exiting SportsPA as requested ..."

    def execute(self, book: AddressBook) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, exit=True)
