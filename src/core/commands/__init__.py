"""Executable commands and their registry."""

from .base import Command, CommandResult

__all__ = ["Command", "CommandResult"]
