"""Identifier numbering — split, collision-check and allocate unique keys."""

from bimkernel.numbering.allocator import (
    UniqueIdentifierAllocator,
    allocate_identifier,
    next_available_number,
)
from bimkernel.numbering.keys import split_identifier
from bimkernel.numbering.taken import TakenSet

__all__ = [
    "TakenSet",
    "UniqueIdentifierAllocator",
    "allocate_identifier",
    "next_available_number",
    "split_identifier",
]
