"""bimkernel — identifier allocation, grouping and colour mapping for BIM commands."""

__version__ = "1.0.0"

from bimkernel.analytics.materials import MaterialQuantity, MaterialUsage, material_quantities
from bimkernel.analytics.rooms import RoomSchedule, number_rooms, room_schedule, untagged_rooms
from bimkernel.analytics.splash import ColorSplashResult, color_splash
from bimkernel.analytics.statistics import ModelStatistics, analyze_model
from bimkernel.colors.mapper import ColorMapper, assign_discrete, assign_gradient
from bimkernel.grouping.accumulator import (
    GroupingAccumulator,
    by_attribute,
    group_entities,
    metric,
)
from bimkernel.models.entity import (
    RGB,
    AttributeSource,
    ColorAssignment,
    GroupBucket,
    IdentifierCandidate,
    RecordSource,
)
from bimkernel.numbering.allocator import (
    UniqueIdentifierAllocator,
    allocate_identifier,
    next_available_number,
)
from bimkernel.numbering.keys import split_identifier
from bimkernel.numbering.taken import TakenSet

__all__ = [
    "__version__",
    # Models
    "AttributeSource",
    "ColorAssignment",
    "GroupBucket",
    "IdentifierCandidate",
    "RGB",
    "RecordSource",
    # Numbering
    "TakenSet",
    "UniqueIdentifierAllocator",
    "allocate_identifier",
    "next_available_number",
    "split_identifier",
    # Grouping
    "GroupingAccumulator",
    "by_attribute",
    "group_entities",
    "metric",
    # Colours
    "ColorMapper",
    "assign_discrete",
    "assign_gradient",
    # Recipes
    "ColorSplashResult",
    "MaterialQuantity",
    "MaterialUsage",
    "ModelStatistics",
    "RoomSchedule",
    "analyze_model",
    "color_splash",
    "material_quantities",
    "number_rooms",
    "room_schedule",
    "untagged_rooms",
]
