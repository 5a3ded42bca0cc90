"""Plain data types shared by the numbering, grouping and colour modules."""

from bimkernel.models.entity import (
    RGB,
    AttributeSource,
    ColorAssignment,
    GroupBucket,
    IdentifierCandidate,
    RecordSource,
)

__all__ = [
    "AttributeSource",
    "ColorAssignment",
    "GroupBucket",
    "IdentifierCandidate",
    "RGB",
    "RecordSource",
]
