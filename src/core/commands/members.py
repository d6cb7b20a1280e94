"""Commands operating on club members."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Tuple

from ..address_book import AddressBook
from ..errors import CommandError
from ..models import EditMemberDescriptor, Member
from ..values import Availability, Index
from .base import Command, CommandResult, select_displayed

LOGGER = logging.getLogger(__name__)

MESSAGE_INVALID_MEMBER_INDEX = "The member index provided is invalid"
MESSAGE_DUPLICATE_MEMBER = "This member already exists in the address book"


def _render(members) -> str:
    return "\n".join(f"{position}. {member}" for position, member in enumerate(members, start=1))


@dataclass(frozen=True)
class AddMemberCommand(Command):
    member: Member

    COMMAND_WORD = "addm"
    MESSAGE_USAGE = (
        "addm: Adds a member to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [d/DAYS] [t/TAG]...\n"
        "Example: addm n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2 d/Mon Wed t/captain"
    )
    MESSAGE_SUCCESS = "New member added: {}"

    def execute(self, book: AddressBook) -> CommandResult:
        if book.has_member(self.member):
            raise CommandError(MESSAGE_DUPLICATE_MEMBER)
        book.add_member(self.member)
        LOGGER.info("Added member %s", self.member.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.member))


@dataclass(frozen=True)
class EditMemberCommand(Command):
    index: Index
    descriptor: EditMemberDescriptor

    COMMAND_WORD = "editm"
    MESSAGE_USAGE = (
        "editm: Edits the details of the member identified by the index number used in the displayed "
        "member list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
        "Example: editm 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS = "Edited member: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    def execute(self, book: AddressBook) -> CommandResult:
        target = select_displayed(book.displayed_members(), self.index, MESSAGE_INVALID_MEMBER_INDEX)
        edited = self.descriptor.apply(target)
        if any(other is not target and other.is_same_member(edited) for other in book.members):
            raise CommandError(MESSAGE_DUPLICATE_MEMBER)
        book.set_member(target, edited)
        LOGGER.info("Edited member %s", edited.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass(frozen=True)
class DeleteMemberCommand(Command):
    index: Index

    COMMAND_WORD = "deletem"
    MESSAGE_USAGE = (
        "deletem: Deletes the member identified by the index number used in the displayed member list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: deletem 1"
    )
    MESSAGE_SUCCESS = "Deleted member: {}"

    def execute(self, book: AddressBook) -> CommandResult:
        target = select_displayed(book.displayed_members(), self.index, MESSAGE_INVALID_MEMBER_INDEX)
        book.remove_member(target)
        LOGGER.info("Deleted member %s", target.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


@dataclass(frozen=True)
class ListMemberCommand(Command):
    COMMAND_WORD = "listm"
    MESSAGE_USAGE = "listm: Lists all members.\nExample: listm"
    MESSAGE_SUCCESS = "Listed all members"
    MESSAGE_EMPTY = "There are no members in the address book"

    def execute(self, book: AddressBook) -> CommandResult:
        book.filter_members()
        members = book.displayed_members()
        if not members:
            return CommandResult(self.MESSAGE_EMPTY)
        return CommandResult(f"{self.MESSAGE_SUCCESS}\n{_render(members)}")


@dataclass(frozen=True)
class FindMemberCommand(Command):
    keywords: Tuple[str, ...]

    COMMAND_WORD = "findm"
    MESSAGE_USAGE = (
        "findm: Finds all members whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: findm alice bob charlie"
    )
    MESSAGE_FOUND = "{} members listed!"

    def matches(self, member: Member) -> bool:
        words = member.name.value.lower().split()
        return any(keyword.lower() in words for keyword in self.keywords)

    def execute(self, book: AddressBook) -> CommandResult:
        book.filter_members(self.matches)
        members = book.displayed_members()
        feedback = self.MESSAGE_FOUND.format(len(members))
        if members:
            feedback = f"{feedback}\n{_render(members)}"
        return CommandResult(feedback)


@dataclass(frozen=True)
class SetMemberAvailabilityCommand(Command):
    indices: Tuple[Index, ...]
    availability: Availability

    COMMAND_WORD = "setm"
    MESSAGE_USAGE = (
        "setm: Sets the availability of the members identified by the index numbers used in the "
        "displayed member list.\n"
        "Parameters: INDEX [MORE_INDICES]... (must be positive integers) d/DAYS\n"
        "Example: setm 1 2 3 d/Mon Fri"
    )
    MESSAGE_SUCCESS = "Set availability of {} to {}"

    def execute(self, book: AddressBook) -> CommandResult:
        displayed = book.displayed_members()
        targets = [
            select_displayed(displayed, index, MESSAGE_INVALID_MEMBER_INDEX) for index in self.indices
        ]
        names = []
        for target in dict.fromkeys(targets):
            book.set_member(target, replace(target, availability=self.availability))
            names.append(str(target.name))
        LOGGER.info("Set availability %s for %d member(s)", self.availability, len(names))
        return CommandResult(self.MESSAGE_SUCCESS.format(", ".join(names), self.availability))
