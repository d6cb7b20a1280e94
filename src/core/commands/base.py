"""Common building blocks for executable commands."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import ClassVar, Sequence, TypeVar

from ..address_book import AddressBook
from ..errors import CommandError
from ..values import Index

T = TypeVar("T")


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    show_help: bool = False
    exit: bool = False


class Command(abc.ABC):
    """A parsed command ready to run against an ``AddressBook``."""

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""

    @abc.abstractmethod
    def execute(self, book: AddressBook) -> CommandResult:
        raise NotImplementedError


def select_displayed(items: Sequence[T], index: Index, invalid_message: str) -> T:
    """Return the displayed item at ``index`` or raise ``CommandError``."""
    if index.zero_based >= len(items):
        raise CommandError(invalid_message)
    return items[index.zero_based]
