"""Argument tokenizing and parsing for SportsPA commands."""

from .tokenizer import ArgumentMultimap, Prefix, tokenize

__all__ = ["ArgumentMultimap", "Prefix", "tokenize"]
