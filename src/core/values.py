"""Immutable, self-validating value objects for SportsPA."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Pattern, Tuple

from .errors import ValidationError

DAYS: Tuple[str, ...] = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")

COMMAND_WORDS: Tuple[str, ...] = (
    "addm",
    "editm",
    "deletem",
    "listm",
    "findm",
    "setm",
    "addf",
    "editf",
    "deletef",
    "listf",
    "findf",
    "alias",
    "unalias",
    "clear",
    "help",
    "exit",
)

_ALNUM = "A-Za-z0-9"


@dataclass(frozen=True)
class ValueObject:
    """Wraps a single canonical string that always satisfies ``is_valid``.

    Subclasses set ``VALIDATION_REGEX`` and ``MESSAGE_CONSTRAINTS``; those with
    rules a regex cannot express override ``is_valid`` instead.
    """

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    VALIDATION_REGEX: ClassVar[Optional[Pattern[str]]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        if cls.VALIDATION_REGEX is None:
            raise NotImplementedError(f"{cls.__name__} must define VALIDATION_REGEX")
        return cls.VALIDATION_REGEX.fullmatch(raw) is not None

    def __str__(self) -> str:
        return self.value


class Name(ValueObject):
    MESSAGE_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    VALIDATION_REGEX = re.compile(rf"[{_ALNUM}][{_ALNUM} ]*")


class Phone(ValueObject):
    MESSAGE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    VALIDATION_REGEX = re.compile(r"[0-9]{3,}")


class Email(ValueObject):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )
    _LOCAL_PART = rf"[{_ALNUM}]+([+_.-][{_ALNUM}]+)*"
    _DOMAIN_PART = rf"[{_ALNUM}]([-{_ALNUM}]*[{_ALNUM}])?"
    _DOMAIN_LAST_PART = rf"[{_ALNUM}][-{_ALNUM}]*[{_ALNUM}]"
    VALIDATION_REGEX = re.compile(rf"{_LOCAL_PART}@({_DOMAIN_PART}\.)*{_DOMAIN_LAST_PART}")


class Address(ValueObject):
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    VALIDATION_REGEX = re.compile(r"[^\s].*", re.DOTALL)


class Tag(ValueObject):
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = re.compile(rf"[{_ALNUM}]+")


class FacilityName(ValueObject):
    MESSAGE_CONSTRAINTS = (
        "Facility names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    VALIDATION_REGEX = re.compile(rf"[{_ALNUM}][{_ALNUM} ]*")


class Location(ValueObject):
    MESSAGE_CONSTRAINTS = "Locations can take any values, and it should not be blank"
    VALIDATION_REGEX = re.compile(r"[^\s].*", re.DOTALL)


class Time(ValueObject):
    MESSAGE_CONSTRAINTS = "Time should be in the 24-hour HH:MM format, between 00:00 and 23:59"
    VALIDATION_REGEX = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


class Capacity(ValueObject):
    MESSAGE_CONSTRAINTS = "Capacity should be a positive integer without leading zeros"
    VALIDATION_REGEX = re.compile(r"[1-9][0-9]*")

    def as_int(self) -> int:
        return int(self.value)


class Shortcut(ValueObject):
    MESSAGE_CONSTRAINTS = "Shortcuts should be a single word without spaces"
    VALIDATION_REGEX = re.compile(r"\S+")


class CommandWord(ValueObject):
    MESSAGE_CONSTRAINTS = "Command word should be one of: " + ", ".join(COMMAND_WORDS)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return raw in COMMAND_WORDS


class Availability(ValueObject):
    """Set of days a member is available, kept in canonical form.

    The raw string is upper-cased and split on whitespace; duplicate days
    collapse onto their first occurrence. ``"mon  Tue mon"`` and ``"MON TUE"``
    produce equal objects. ``Availability.empty()`` stands for "not set"; it
    cannot be produced from user input.
    """

    MESSAGE_CONSTRAINTS = (
        "Availability should be given as space-separated days of the week, "
        "e.g. Mon Tue Sun (valid days: " + " ".join(DAYS) + ")"
    )

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        days = self.normalize(self.value)
        if not self.is_valid_days(days):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", " ".join(days))

    @staticmethod
    def normalize(raw: str) -> List[str]:
        """Upper-case, split and de-duplicate ``raw`` preserving first occurrence."""
        return list(dict.fromkeys(raw.strip().upper().split()))

    @staticmethod
    def is_valid_days(days: List[str]) -> bool:
        return bool(days) and all(day in DAYS for day in days)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return cls.is_valid_days(cls.normalize(raw))

    @classmethod
    def empty(cls) -> "Availability":
        instance = cls.__new__(cls)
        object.__setattr__(instance, "value", "")
        return instance

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def days(self) -> Tuple[str, ...]:
        return tuple(self.value.split())

    def is_available_on(self, day: str) -> bool:
        return day.upper() in self.days


@dataclass(frozen=True)
class Index:
    """Position in a displayed list, stored zero-based."""

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValueError(f"Index must not be negative: {self.zero_based}")

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1
