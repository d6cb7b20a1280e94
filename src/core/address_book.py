"""In-memory address book of members, facilities and command aliases."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from .models import Facility, Member
from .values import CommandWord, Shortcut

LOGGER = logging.getLogger(__name__)

MemberPredicate = Callable[[Member], bool]
FacilityPredicate = Callable[[Facility], bool]


def _show_all(_item: object) -> bool:
    return True


class AddressBook:
    """Holds all members and facilities plus the currently displayed subsets.

    Commands address entries through the *displayed* lists, which are the full
    lists narrowed by the last ``find`` predicate.
    """

    def __init__(self, aliases: Optional[Mapping[Shortcut, CommandWord]] = None) -> None:
        self._members: List[Member] = []
        self._facilities: List[Facility] = []
        self._aliases: Dict[Shortcut, CommandWord] = dict(aliases or {})
        self._member_filter: MemberPredicate = _show_all
        self._facility_filter: FacilityPredicate = _show_all

    # Members

    @property
    def members(self) -> Sequence[Member]:
        return tuple(self._members)

    def displayed_members(self) -> Sequence[Member]:
        return tuple(member for member in self._members if self._member_filter(member))

    def has_member(self, member: Member) -> bool:
        return any(existing.is_same_member(member) for existing in self._members)

    def add_member(self, member: Member) -> None:
        self._members.append(member)
        LOGGER.debug("Added member %s", member.name)

    def set_member(self, target: Member, edited: Member) -> None:
        self._members[self._members.index(target)] = edited

    def remove_member(self, member: Member) -> None:
        self._members.remove(member)

    def filter_members(self, predicate: Optional[MemberPredicate] = None) -> None:
        self._member_filter = predicate or _show_all

    # Facilities

    @property
    def facilities(self) -> Sequence[Facility]:
        return tuple(self._facilities)

    def displayed_facilities(self) -> Sequence[Facility]:
        return tuple(facility for facility in self._facilities if self._facility_filter(facility))

    def has_facility(self, facility: Facility) -> bool:
        return any(existing.is_same_facility(facility) for existing in self._facilities)

    def add_facility(self, facility: Facility) -> None:
        self._facilities.append(facility)
        LOGGER.debug("Added facility %s", facility.name)

    def set_facility(self, target: Facility, edited: Facility) -> None:
        self._facilities[self._facilities.index(target)] = edited

    def remove_facility(self, facility: Facility) -> None:
        self._facilities.remove(facility)

    def filter_facilities(self, predicate: Optional[FacilityPredicate] = None) -> None:
        self._facility_filter = predicate or _show_all

    # Aliases

    @property
    def aliases(self) -> Mapping[Shortcut, CommandWord]:
        return dict(self._aliases)

    def add_alias(self, shortcut: Shortcut, command_word: CommandWord) -> None:
        self._aliases[shortcut] = command_word

    def remove_alias(self, shortcut: Shortcut) -> bool:
        return self._aliases.pop(shortcut, None) is not None

    def alias_words(self) -> Dict[str, str]:
        """Return aliases as plain ``shortcut -> command word`` strings."""
        return {shortcut.value: command_word.value for shortcut, command_word in self._aliases.items()}

    def clear(self) -> None:
        self._members.clear()
        self._facilities.clear()
        self.filter_members()
        self.filter_facilities()
