"""Routes raw user input through parsing and execution."""

from __future__ import annotations

import logging
from typing import Optional

from .address_book import AddressBook
from .commands.base import CommandResult
from .commands.dispatcher import CommandDispatcher
from .config import Config
from .errors import ParseError

LOGGER = logging.getLogger(__name__)


class Router:
    """Central orchestrator translating input lines into command executions."""

    def __init__(
        self,
        config: Config,
        book: Optional[AddressBook] = None,
        dispatcher: Optional[CommandDispatcher] = None,
    ) -> None:
        self._config = config
        self._book = book if book is not None else AddressBook(aliases=config.aliases)
        self._dispatcher = dispatcher or CommandDispatcher()

    @property
    def book(self) -> AddressBook:
        return self._book

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    def handle_input(self, text: str) -> CommandResult:
        """Parse and execute one line of input.

        Raises ``ParseError`` for malformed input and ``CommandError`` when the
        command cannot be applied to the address book.
        """
        LOGGER.debug("Received input: %s", text)
        try:
            command = self._dispatcher.parse_command(text, self._book.alias_words())
        except ParseError as exc:
            LOGGER.debug("Rejected input %r: %s", text, exc.message)
            raise
        LOGGER.info("Executing %s", type(command).__name__)
        return command.execute(self._book)
