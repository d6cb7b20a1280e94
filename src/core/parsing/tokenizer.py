"""Splits command arguments into a preamble and prefixed values."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Prefix:
    """Marker such as ``n/`` that introduces a field value."""

    marker: str

    def __str__(self) -> str:
        return self.marker


@dataclass(frozen=True)
class ArgumentMultimap:
    """Immutable result of tokenizing one argument string."""

    preamble: str
    values: Mapping[Prefix, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    def get_value(self, prefix: Prefix) -> Optional[str]:
        """Return the last value supplied for ``prefix``, or None if absent."""
        found = self.values.get(prefix, ())
        return found[-1] if found else None

    def get_all_values(self, prefix: Prefix) -> Tuple[str, ...]:
        return self.values.get(prefix, ())

    def is_present(self, prefix: Prefix) -> bool:
        return bool(self.values.get(prefix))

    def are_all_present(self, *prefixes: Prefix) -> bool:
        return all(self.is_present(prefix) for prefix in prefixes)


@dataclass(frozen=True)
class _Occurrence:
    start: int
    prefix: Prefix


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize ``args`` against the prefixes recognized by one command.

    A marker only counts when it starts the string or follows whitespace, so
    ``1n/foo`` stays in the preamble while ``1 n/foo`` does not.
    """

    prefixes = tuple(dict.fromkeys(prefixes))
    text = " " + args
    occurrences = sorted(_find_occurrences(text, prefixes), key=lambda occ: occ.start)

    preamble_end = occurrences[0].start if occurrences else len(text)
    collected: Dict[Prefix, List[str]] = {prefix: [] for prefix in prefixes}
    for current, following in zip(occurrences, occurrences[1:] + [None]):
        value_start = current.start + len(current.prefix.marker)
        value_end = following.start if following else len(text)
        collected[current.prefix].append(text[value_start:value_end].strip())

    return ArgumentMultimap(
        preamble=text[:preamble_end].strip(),
        values=MappingProxyType(
            {prefix: tuple(found) for prefix, found in collected.items() if found}
        ),
    )


def _find_occurrences(text: str, prefixes: Sequence[Prefix]) -> List[_Occurrence]:
    occurrences = []
    for prefix in prefixes:
        marker = prefix.marker
        position = text.find(marker)
        while position != -1:
            if position > 0 and text[position - 1].isspace():
                occurrences.append(_Occurrence(start=position, prefix=prefix))
            position = text.find(marker, position + 1)
    return occurrences
