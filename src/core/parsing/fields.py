"""Field parsers mapping raw strings to validated value objects.

Every parser trims surrounding whitespace before validating and raises
``ValidationError`` carrying the target type's constraint message.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Type, TypeVar

from ..errors import InvalidIndexError, ValidationError
from ..values import (
    Address,
    Availability,
    Capacity,
    CommandWord,
    Email,
    FacilityName,
    Index,
    Location,
    Name,
    Phone,
    Shortcut,
    Tag,
    Time,
    ValueObject,
)

V = TypeVar("V", bound=ValueObject)

# Largest one-based index accepted; anything above is a malformed index.
MAX_INDEX = 2**31 - 1


def _parse_value(value_type: Type[V], raw: str) -> V:
    if raw is None:
        raise TypeError(f"{value_type.__name__} value must not be None")
    trimmed = raw.strip()
    if not value_type.is_valid(trimmed):
        raise ValidationError(value_type.MESSAGE_CONSTRAINTS)
    return value_type(trimmed)


def parse_index(one_based_index: str) -> Index:
    """Parse a one-based index such as ``"2"`` into an ``Index``."""
    trimmed = one_based_index.strip()
    if not (trimmed.isascii() and trimmed.isdigit()) or not 0 < int(trimmed) <= MAX_INDEX:
        raise InvalidIndexError()
    return Index.from_one_based(int(trimmed))


def parse_indices(raw: str) -> List[Index]:
    """Parse whitespace separated one-based indices, e.g. ``"1 3 4"``."""
    parts = raw.split()
    if not parts:
        raise InvalidIndexError()
    return [parse_index(part) for part in parts]


def parse_name(name: str) -> Name:
    return _parse_value(Name, name)


def parse_phone(phone: str) -> Phone:
    return _parse_value(Phone, phone)


def parse_email(email: str) -> Email:
    return _parse_value(Email, email)


def parse_address(address: str) -> Address:
    return _parse_value(Address, address)


def parse_tag(tag: str) -> Tag:
    return _parse_value(Tag, tag)


def parse_tags(tags: Iterable[str]) -> FrozenSet[Tag]:
    """Parse every tag, failing on the first invalid one."""
    return frozenset(parse_tag(tag) for tag in tags)


def parse_facility_name(name: str) -> FacilityName:
    return _parse_value(FacilityName, name)


def parse_location(location: str) -> Location:
    return _parse_value(Location, location)


def parse_time(time: str) -> Time:
    return _parse_value(Time, time)


def parse_capacity(capacity: str) -> Capacity:
    return _parse_value(Capacity, capacity)


def parse_shortcut(shortcut: str) -> Shortcut:
    return _parse_value(Shortcut, shortcut)


def parse_command_word(command_word: str) -> CommandWord:
    return _parse_value(CommandWord, command_word)


def parse_availability(availability: str) -> Availability:
    """Parse days such as ``"mon Tue mon"`` into a canonical ``Availability``.

    Days are upper-cased and duplicates collapse before validation, so the
    example above yields ``"MON TUE"``.
    """
    return _parse_value(Availability, availability)
