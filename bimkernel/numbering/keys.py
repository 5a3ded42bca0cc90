"""Split identifier candidates around their trailing run of digits."""

from __future__ import annotations

from bimkernel.models.entity import IdentifierCandidate


def split_identifier(candidate: str) -> IdentifierCandidate:
    """Return ``(prefix, numeric_span, suffix)`` for *candidate*.

    The numeric span is the last maximal run of decimal digits in the
    string; whatever follows it is the suffix.  A candidate without digits
    is all prefix.  ``split_identifier(s).original == s`` for every string.

    >>> split_identifier("L2-105b").numeric_span
    '105'
    """
    end = -1
    start = -1
    for i in range(len(candidate) - 1, -1, -1):
        if candidate[i].isdecimal():
            if end == -1:
                end = i
            start = i
        elif end != -1:
            break

    if start == -1:
        return IdentifierCandidate(prefix=candidate)

    return IdentifierCandidate(
        prefix=candidate[:start],
        numeric_span=candidate[start:end + 1],
        suffix=candidate[end + 1:],
    )
