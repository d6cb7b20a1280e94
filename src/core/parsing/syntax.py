"""Prefix markers recognized by SportsPA commands."""

from __future__ import annotations

from .tokenizer import Prefix

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_AVAILABILITY = Prefix("d/")

PREFIX_LOCATION = Prefix("l/")
PREFIX_TIME = Prefix("t/")
PREFIX_CAPACITY = Prefix("c/")

PREFIX_SHORTCUT = Prefix("s/")
PREFIX_COMMAND_WORD = Prefix("cw/")
