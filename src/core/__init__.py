"""Core domain logic for SportsPA."""

from .config import Config, load_config
from .errors import (
    CommandError,
    ConfigError,
    FormatError,
    InvalidIndexError,
    ParseError,
    SemanticError,
    SportsPaError,
    UnknownCommandError,
    ValidationError,
)
from .models import EditFacilityDescriptor, EditMemberDescriptor, Facility, Member
from .address_book import AddressBook
from .router import Router

__all__ = [
    "Config",
    "load_config",
    "SportsPaError",
    "ParseError",
    "FormatError",
    "ValidationError",
    "InvalidIndexError",
    "SemanticError",
    "UnknownCommandError",
    "CommandError",
    "ConfigError",
    "Facility",
    "Member",
    "EditMemberDescriptor",
    "EditFacilityDescriptor",
    "AddressBook",
    "Router",
]
