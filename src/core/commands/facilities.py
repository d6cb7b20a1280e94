"""Commands operating on facilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from ..address_book import AddressBook
from ..errors import CommandError
from ..models import EditFacilityDescriptor, Facility
from ..values import Index
from .base import Command, CommandResult, select_displayed

LOGGER = logging.getLogger(__name__)

MESSAGE_INVALID_FACILITY_INDEX = "The facility index provided is invalid"
MESSAGE_DUPLICATE_FACILITY = "This facility already exists in the address book"


def _render(facilities) -> str:
    return "\n".join(f"{position}. {facility}" for position, facility in enumerate(facilities, start=1))


@dataclass(frozen=True)
class AddFacilityCommand(Command):
    facility: Facility

    COMMAND_WORD = "addf"
    MESSAGE_USAGE = (
        "addf: Adds a facility to the address book. "
        "Parameters: n/NAME l/LOCATION t/TIME c/CAPACITY\n"
        "Example: addf n/Court 1 l/University Sports Hall t/11:30 c/5"
    )
    MESSAGE_SUCCESS = "New facility added: {}"

    def execute(self, book: AddressBook) -> CommandResult:
        if book.has_facility(self.facility):
            raise CommandError(MESSAGE_DUPLICATE_FACILITY)
        book.add_facility(self.facility)
        LOGGER.info("Added facility %s", self.facility.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.facility))


@dataclass(frozen=True)
class EditFacilityCommand(Command):
    index: Index
    descriptor: EditFacilityDescriptor

    COMMAND_WORD = "editf"
    MESSAGE_USAGE = (
        "editf: Edits the facility identified by the index number used in the displayed facility list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [l/LOCATION] [t/TIME] [c/CAPACITY]\n"
        "Example: editf 1 t/13:00 c/10"
    )
    MESSAGE_SUCCESS = "Edited facility: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    def execute(self, book: AddressBook) -> CommandResult:
        target = select_displayed(book.displayed_facilities(), self.index, MESSAGE_INVALID_FACILITY_INDEX)
        edited = self.descriptor.apply(target)
        if any(other is not target and other.is_same_facility(edited) for other in book.facilities):
            raise CommandError(MESSAGE_DUPLICATE_FACILITY)
        book.set_facility(target, edited)
        LOGGER.info("Edited facility %s", edited.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass(frozen=True)
class DeleteFacilityCommand(Command):
    index: Index

    COMMAND_WORD = "deletef"
    MESSAGE_USAGE = (
        "deletef: Deletes the facility identified by the index number used in the displayed facility list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: deletef 1"
    )
    MESSAGE_SUCCESS = "Deleted facility: {}"

    def execute(self, book: AddressBook) -> CommandResult:
        target = select_displayed(book.displayed_facilities(), self.index, MESSAGE_INVALID_FACILITY_INDEX)
        book.remove_facility(target)
        LOGGER.info("Deleted facility %s", target.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


@dataclass(frozen=True)
class ListFacilityCommand(Command):
    COMMAND_WORD = "listf"
    MESSAGE_USAGE = "listf: Lists all facilities.\nExample: listf"
    MESSAGE_SUCCESS = "Listed all facilities"
    MESSAGE_EMPTY = "There are no facilities in the address book"

    def execute(self, book: AddressBook) -> CommandResult:
        book.filter_facilities()
        facilities = book.displayed_facilities()
        if not facilities:
            return CommandResult(self.MESSAGE_EMPTY)
        return CommandResult(f"{self.MESSAGE_SUCCESS}\n{_render(facilities)}")


@dataclass(frozen=True)
class FindFacilityCommand(Command):
    """Shows facilities whose location contains any keyword as a whole word."""

    keywords: Tuple[str, ...]

    COMMAND_WORD = "findf"
    MESSAGE_USAGE = (
        "findf: Finds all facilities whose locations contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: findf Clementi Utown"
    )
    MESSAGE_FOUND = "{} facilities listed!"

    def matches(self, facility: Facility) -> bool:
        words = facility.location.value.lower().split()
        return any(keyword.lower() in words for keyword in self.keywords)

    def execute(self, book: AddressBook) -> CommandResult:
        book.filter_facilities(self.matches)
        facilities = book.displayed_facilities()
        feedback = self.MESSAGE_FOUND.format(len(facilities))
        if facilities:
            feedback = f"{feedback}\n{_render(facilities)}"
        return CommandResult(feedback)
