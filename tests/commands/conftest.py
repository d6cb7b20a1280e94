"""Shared fixtures for command tests."""

from __future__ import annotations

import pytest

from src.core.address_book import AddressBook
from src.core.models import Facility, Member
from src.core.values import (
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


@pytest.fixture
def amy():
    return Member(
        name=Name("Amy Bee"),
        phone=Phone("11111111"),
        email=Email("amy@example.com"),
        address=Address("Block 312, Amy Street 1"),
        availability=Availability("MON TUE"),
        tags=frozenset({Tag("friend")}),
    )


@pytest.fixture
def bob():
    return Member(
        name=Name("Bob Choo"),
        phone=Phone("22222222"),
        email=Email("bob@example.com"),
        address=Address("Block 123, Bobby Street 3"),
    )


@pytest.fixture
def court():
    return Facility(
        name=FacilityName("Court 1"),
        location=Location("University Sports Hall"),
        time=Time("11:30"),
        capacity=Capacity("5"),
    )


@pytest.fixture
def field():
    return Facility(
        name=FacilityName("Field"),
        location=Location("Kent Ridge Field"),
        time=Time("15:00"),
        capacity=Capacity("20"),
    )


@pytest.fixture
def book(amy, bob, court, field):
    """Address book holding two members and two facilities."""
    address_book = AddressBook()
    address_book.add_member(amy)
    address_book.add_member(bob)
    address_book.add_facility(court)
    address_book.add_facility(field)
    return address_book

