"""Domain models for SportsPA."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import FrozenSet, Optional

from .values import (
    Address,
    Availability,
    Capacity,
    Email,
    FacilityName,
    Location,
    Name,
    Phone,
    Tag,
    Time,
)


@dataclass(frozen=True)
class Facility:
    name: FacilityName
    location: Location
    time: Time
    capacity: Capacity

    def __post_init__(self) -> None:
        for slot in fields(self):
            if getattr(self, slot.name) is None:
                raise TypeError(f"Facility {slot.name} must not be None")

    def is_same_facility(self, other: "Facility") -> bool:
        """Facilities clash when they share a name and location, ignoring case."""
        return (
            self.name.value.lower() == other.name.value.lower()
            and self.location.value.lower() == other.location.value.lower()
        )

    def __str__(self) -> str:
        return f"{self.name}; Location: {self.location}; Time: {self.time}; Capacity: {self.capacity}"


@dataclass(frozen=True)
class Member:
    name: Name
    phone: Phone
    email: Email
    address: Address
    availability: Availability = field(default_factory=Availability.empty)
    tags: FrozenSet[Tag] = field(default_factory=frozenset)

    def is_same_member(self, other: "Member") -> bool:
        return self.name.value.lower() == other.name.value.lower()

    def __str__(self) -> str:
        parts = [
            f"{self.name}",
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Address: {self.address}",
        ]
        if not self.availability.is_empty:
            parts.append(f"Availability: {self.availability}")
        if self.tags:
            parts.append("Tags: " + "".join(f"[{tag}]" for tag in sorted(self.tags, key=str)))
        return "; ".join(parts)


@dataclass(frozen=True)
class EditMemberDescriptor:
    """Fields to change on a member; None means leave unchanged."""

    name: Optional[Name] = None
    phone: Optional[Phone] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    tags: Optional[FrozenSet[Tag]] = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, slot.name) is not None for slot in fields(self))

    def apply(self, member: Member) -> Member:
        changes = {
            slot.name: getattr(self, slot.name)
            for slot in fields(self)
            if getattr(self, slot.name) is not None
        }
        return replace(member, **changes)


@dataclass(frozen=True)
class EditFacilityDescriptor:
    name: Optional[FacilityName] = None
    location: Optional[Location] = None
    time: Optional[Time] = None
    capacity: Optional[Capacity] = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, slot.name) is not None for slot in fields(self))

    def apply(self, facility: Facility) -> Facility:
        changes = {
            slot.name: getattr(self, slot.name)
            for slot in fields(self)
            if getattr(self, slot.name) is not None
        }
        return replace(facility, **changes)
