"""Central registry of supported SportsPA commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple, Type

from ..parsing import parsers
from ..parsing.parsers import CommandParser
from .base import Command
from .facilities import (
    AddFacilityCommand,
    DeleteFacilityCommand,
    EditFacilityCommand,
    FindFacilityCommand,
    ListFacilityCommand,
)
from .general import AliasCommand, ClearCommand, ExitCommand, HelpCommand, UnaliasCommand
from .members import (
    AddMemberCommand,
    DeleteMemberCommand,
    EditMemberCommand,
    FindMemberCommand,
    ListMemberCommand,
    SetMemberAvailabilityCommand,
)


@dataclass(frozen=True)
class CommandSpec:
    """Metadata describing a single supported command."""

    command: Type[Command]
    parse: CommandParser
    description: str

    @property
    def name(self) -> str:
        return self.command.COMMAND_WORD

    @property
    def usage(self) -> str:
        return self.command.MESSAGE_USAGE

    def usage_line(self) -> str:
        """Return the parameter line of the usage text for help output."""
        for line in self.usage.splitlines():
            if "Parameters:" in line:
                return f"{self.name} " + line.split("Parameters:", 1)[1].strip()
        return self.name


def _build_specs() -> Tuple[CommandSpec, ...]:
    return (
        CommandSpec(AddMemberCommand, parsers.parse_add_member, "Add a member."),
        CommandSpec(EditMemberCommand, parsers.parse_edit_member, "Edit a displayed member."),
        CommandSpec(DeleteMemberCommand, parsers.parse_delete_member, "Delete a displayed member."),
        CommandSpec(ListMemberCommand, parsers.parse_list_member, "List all members."),
        CommandSpec(FindMemberCommand, parsers.parse_find_member, "Find members by name."),
        CommandSpec(
            SetMemberAvailabilityCommand,
            parsers.parse_set_member_availability,
            "Set the availability of displayed members.",
        ),
        CommandSpec(AddFacilityCommand, parsers.parse_add_facility, "Add a facility."),
        CommandSpec(EditFacilityCommand, parsers.parse_edit_facility, "Edit a displayed facility."),
        CommandSpec(DeleteFacilityCommand, parsers.parse_delete_facility, "Delete a displayed facility."),
        CommandSpec(ListFacilityCommand, parsers.parse_list_facility, "List all facilities."),
        CommandSpec(FindFacilityCommand, parsers.parse_find_facility, "Find facilities by location."),
        CommandSpec(AliasCommand, parsers.parse_alias, "Create a shortcut for a command word."),
        CommandSpec(UnaliasCommand, parsers.parse_unalias, "Remove a shortcut."),
        CommandSpec(ClearCommand, parsers.parse_clear, "Remove all members and facilities."),
        CommandSpec(HelpCommand, parsers.parse_help, "Show this command list."),
        CommandSpec(ExitCommand, parsers.parse_exit, "Exit SportsPA."),
    )


COMMAND_SPECS: Tuple[CommandSpec, ...] = _build_specs()
COMMAND_LOOKUP: Dict[str, CommandSpec] = {spec.name: spec for spec in COMMAND_SPECS}


def get_command_spec(name: str) -> Optional[CommandSpec]:
    """Return the command spec for a given command word."""
    return COMMAND_LOOKUP.get(name)


def iter_command_specs() -> Sequence[CommandSpec]:
    """Return the immutable list of command specs in display order."""
    return COMMAND_SPECS
