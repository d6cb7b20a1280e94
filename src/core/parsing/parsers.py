"""Command parsers: one function per command word.

Each parser receives the argument string that followed the command word and
returns a ready-to-execute ``Command``. Structural problems raise
``FormatError`` with the command's usage; field values are validated by the
field parsers, whose ``ValidationError`` propagates unchanged. When a prefix is
repeated only its last value is parsed.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Type, TypeVar

from ..commands.base import Command
from ..commands.facilities import (
    AddFacilityCommand,
    DeleteFacilityCommand,
    EditFacilityCommand,
    FindFacilityCommand,
    ListFacilityCommand,
)
from ..commands.general import (
    AliasCommand,
    ClearCommand,
    ExitCommand,
    HelpCommand,
    UnaliasCommand,
)
from ..commands.members import (
    AddMemberCommand,
    DeleteMemberCommand,
    EditMemberCommand,
    FindMemberCommand,
    ListMemberCommand,
    SetMemberAvailabilityCommand,
)
from ..errors import FormatError, InvalidIndexError, SemanticError
from ..models import EditFacilityDescriptor, EditMemberDescriptor, Facility, Member
from ..values import Availability, Index
from .fields import (
    parse_address,
    parse_availability,
    parse_capacity,
    parse_command_word,
    parse_email,
    parse_facility_name,
    parse_index,
    parse_indices,
    parse_location,
    parse_name,
    parse_phone,
    parse_shortcut,
    parse_tags,
    parse_time,
)
from .syntax import (
    PREFIX_ADDRESS,
    PREFIX_AVAILABILITY,
    PREFIX_CAPACITY,
    PREFIX_COMMAND_WORD,
    PREFIX_EMAIL,
    PREFIX_LOCATION,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_SHORTCUT,
    PREFIX_TAG,
    PREFIX_TIME,
)
from .tokenizer import ArgumentMultimap, Prefix, tokenize

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

CommandParser = Callable[[str], Command]


def _require_fields(args: str, usage: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize ``args`` and insist on every prefix with an empty preamble."""
    multimap = tokenize(args, *prefixes)
    if multimap.preamble or not multimap.are_all_present(*prefixes):
        raise FormatError(usage)
    return multimap


def _optional(
    multimap: ArgumentMultimap,
    prefix: Prefix,
    parse: Callable[[str], T],
    default: Optional[T] = None,
) -> Optional[T]:
    value = multimap.get_value(prefix)
    return parse(value) if value is not None else default


def _preamble_index(multimap: ArgumentMultimap, usage: str) -> Index:
    try:
        return parse_index(multimap.preamble)
    except InvalidIndexError as exc:
        raise FormatError(usage) from exc


# Facilities


def parse_add_facility(args: str) -> AddFacilityCommand:
    multimap = _require_fields(
        args,
        AddFacilityCommand.MESSAGE_USAGE,
        PREFIX_NAME,
        PREFIX_LOCATION,
        PREFIX_TIME,
        PREFIX_CAPACITY,
    )
    facility = Facility(
        name=parse_facility_name(multimap.get_value(PREFIX_NAME)),
        location=parse_location(multimap.get_value(PREFIX_LOCATION)),
        time=parse_time(multimap.get_value(PREFIX_TIME)),
        capacity=parse_capacity(multimap.get_value(PREFIX_CAPACITY)),
    )
    return AddFacilityCommand(facility)


def parse_edit_facility(args: str) -> EditFacilityCommand:
    multimap = tokenize(args, PREFIX_NAME, PREFIX_LOCATION, PREFIX_TIME, PREFIX_CAPACITY)
    index = _preamble_index(multimap, EditFacilityCommand.MESSAGE_USAGE)

    descriptor = EditFacilityDescriptor(
        name=_optional(multimap, PREFIX_NAME, parse_facility_name),
        location=_optional(multimap, PREFIX_LOCATION, parse_location),
        time=_optional(multimap, PREFIX_TIME, parse_time),
        capacity=_optional(multimap, PREFIX_CAPACITY, parse_capacity),
    )
    if not descriptor.is_any_field_edited():
        raise SemanticError(EditFacilityCommand.MESSAGE_NOT_EDITED)
    return EditFacilityCommand(index, descriptor)


def parse_delete_facility(args: str) -> DeleteFacilityCommand:
    multimap = tokenize(args)
    return DeleteFacilityCommand(_preamble_index(multimap, DeleteFacilityCommand.MESSAGE_USAGE))


def parse_find_facility(args: str) -> FindFacilityCommand:
    keywords = tuple(args.split())
    if not keywords:
        raise FormatError(FindFacilityCommand.MESSAGE_USAGE)
    return FindFacilityCommand(keywords)


# Members


def parse_add_member(args: str) -> AddMemberCommand:
    multimap = tokenize(
        args,
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_AVAILABILITY,
        PREFIX_TAG,
    )
    required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    if multimap.preamble or not multimap.are_all_present(*required):
        raise FormatError(AddMemberCommand.MESSAGE_USAGE)

    member = Member(
        name=parse_name(multimap.get_value(PREFIX_NAME)),
        phone=parse_phone(multimap.get_value(PREFIX_PHONE)),
        email=parse_email(multimap.get_value(PREFIX_EMAIL)),
        address=parse_address(multimap.get_value(PREFIX_ADDRESS)),
        availability=_optional(multimap, PREFIX_AVAILABILITY, parse_availability, Availability.empty()),
        tags=parse_tags(multimap.get_all_values(PREFIX_TAG)),
    )
    return AddMemberCommand(member)


def _parse_tags_for_edit(multimap: ArgumentMultimap):
    """Parse ``t/`` values for an edit; a lone empty ``t/`` clears all tags."""
    tags = multimap.get_all_values(PREFIX_TAG)
    if not tags:
        return None
    if tags == ("",):
        return frozenset()
    return parse_tags(tags)


def parse_edit_member(args: str) -> EditMemberCommand:
    multimap = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG)
    index = _preamble_index(multimap, EditMemberCommand.MESSAGE_USAGE)

    descriptor = EditMemberDescriptor(
        name=_optional(multimap, PREFIX_NAME, parse_name),
        phone=_optional(multimap, PREFIX_PHONE, parse_phone),
        email=_optional(multimap, PREFIX_EMAIL, parse_email),
        address=_optional(multimap, PREFIX_ADDRESS, parse_address),
        tags=_parse_tags_for_edit(multimap),
    )
    if not descriptor.is_any_field_edited():
        raise SemanticError(EditMemberCommand.MESSAGE_NOT_EDITED)
    return EditMemberCommand(index, descriptor)


def parse_delete_member(args: str) -> DeleteMemberCommand:
    multimap = tokenize(args)
    return DeleteMemberCommand(_preamble_index(multimap, DeleteMemberCommand.MESSAGE_USAGE))


def parse_find_member(args: str) -> FindMemberCommand:
    keywords = tuple(args.split())
    if not keywords:
        raise FormatError(FindMemberCommand.MESSAGE_USAGE)
    return FindMemberCommand(keywords)


def parse_set_member_availability(args: str) -> SetMemberAvailabilityCommand:
    multimap = tokenize(args, PREFIX_AVAILABILITY)
    usage = SetMemberAvailabilityCommand.MESSAGE_USAGE
    if not multimap.is_present(PREFIX_AVAILABILITY):
        raise FormatError(usage)
    try:
        indices = parse_indices(multimap.preamble)
    except InvalidIndexError as exc:
        raise FormatError(usage) from exc
    availability = parse_availability(multimap.get_value(PREFIX_AVAILABILITY))
    return SetMemberAvailabilityCommand(tuple(indices), availability)


# Aliases and application commands


def parse_alias(args: str) -> AliasCommand:
    multimap = _require_fields(args, AliasCommand.MESSAGE_USAGE, PREFIX_SHORTCUT, PREFIX_COMMAND_WORD)
    return AliasCommand(
        shortcut=parse_shortcut(multimap.get_value(PREFIX_SHORTCUT)),
        command_word=parse_command_word(multimap.get_value(PREFIX_COMMAND_WORD)),
    )


def parse_unalias(args: str) -> UnaliasCommand:
    if not args.strip():
        raise FormatError(UnaliasCommand.MESSAGE_USAGE)
    return UnaliasCommand(parse_shortcut(args))


def no_arguments(command_type: Type[Command]) -> CommandParser:
    """Build a parser for commands that ignore their arguments."""

    def _parse(args: str) -> Command:
        if args.strip():
            LOGGER.debug("Ignoring arguments for %s: %r", command_type.COMMAND_WORD, args)
        return command_type()

    return _parse


parse_list_member = no_arguments(ListMemberCommand)
parse_list_facility = no_arguments(ListFacilityCommand)
parse_clear = no_arguments(ClearCommand)
parse_help = no_arguments(HelpCommand)
parse_exit = no_arguments(ExitCommand)
