"""Collision-free identifier allocation.

Usage::

    from bimkernel.numbering import TakenSet, allocate_identifier

    taken = TakenSet(["200", "201"])
    number = allocate_identifier("200", taken)   # "202"
    taken.add(number)

Resolution ladder, first free candidate wins:

1. the candidate itself (an empty candidate is replaced by ``"1"``)
2. the trailing number incremented, keeping its zero-padded width
3. the original candidate with a letter ``A``..``Z`` appended
4. the original candidate plus ``-`` and a random 4-character token
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

from bimkernel.config import (
    EMPTY_CANDIDATE,
    LETTER_SUFFIXES,
    MAX_NUMERIC_PROBES,
    NEXT_NUMBER_WINDOW,
    RANDOM_TOKEN_LENGTH,
)
from bimkernel.numbering.keys import split_identifier
from bimkernel.numbering.taken import TakenSet, as_taken_set

logger = logging.getLogger(__name__)


def _parse_number(text: str) -> int | None:
    """Parse a plain ASCII digit string, or return None."""
    if not (text.isascii() and text.isdecimal()):
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter allows for str -> int
        return None


def allocate_identifier(candidate: str | None, taken: TakenSet | Iterable[str]) -> str:
    """Return an identifier derived from *candidate* that is not in *taken*.

    Deterministic unless every numeric and letter probe is exhausted, in
    which case a random token is appended.  Never raises.
    """
    taken = as_taken_set(taken)
    if not candidate:
        candidate = EMPTY_CANDIDATE

    if candidate not in taken:
        return candidate

    parts = split_identifier(candidate)
    base = _parse_number(parts.numeric_span)
    if base is not None:
        width = len(parts.numeric_span)
        for step in range(1, MAX_NUMERIC_PROBES + 1):
            probe = parts.prefix + str(base + step).zfill(width) + parts.suffix
            if probe not in taken:
                logger.debug("Renumbered %r -> %r", candidate, probe)
                return probe

    for letter in LETTER_SUFFIXES:
        probe = candidate + letter
        if probe not in taken:
            logger.debug("Renumbered %r -> %r (letter suffix)", candidate, probe)
            return probe

    token = uuid.uuid4().hex[:RANDOM_TOKEN_LENGTH].upper()
    probe = f"{candidate}-{token}"
    logger.warning("Deterministic probes exhausted for %r, using %r", candidate, probe)
    return probe


def next_available_number(taken: TakenSet | Iterable[str]) -> str:
    """Return the next free plain number above the highest numeric identifier."""
    taken = as_taken_set(taken)
    highest = 0
    for identifier in taken:
        value = _parse_number(identifier)
        if value is not None:
            highest = max(highest, value)

    for value in range(highest + 1, highest + NEXT_NUMBER_WINDOW):
        probe = str(value)
        if probe not in taken:
            return probe
    return str(highest + 1)


class UniqueIdentifierAllocator:
    """Allocate a run of identifiers against one caller-owned TakenSet.

    Each allocation is recorded in the set before the next one starts.
    """

    def __init__(self, taken: TakenSet | None = None) -> None:
        self.taken = taken if taken is not None else TakenSet()

    def allocate(self, candidate: str | None) -> str:
        identifier = allocate_identifier(candidate, self.taken)
        self.taken.add(identifier)
        return identifier

    def next_number(self) -> str:
        identifier = next_available_number(self.taken)
        self.taken.add(identifier)
        return identifier
