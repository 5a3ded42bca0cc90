"""Analytics — room, colour-splash, material and model-statistics recipes."""

from bimkernel.analytics.materials import MaterialQuantity, MaterialUsage, material_quantities
from bimkernel.analytics.rooms import (
    RoomRow,
    RoomSchedule,
    number_rooms,
    room_schedule,
    untagged_rooms,
)
from bimkernel.analytics.splash import ColorSplashResult, color_splash
from bimkernel.analytics.statistics import (
    LevelCount,
    ModelStatistics,
    TypeCount,
    analyze_model,
    category_counts,
    level_statistics,
    type_breakdown,
)

__all__ = [
    "ColorSplashResult",
    "LevelCount",
    "MaterialQuantity",
    "MaterialUsage",
    "ModelStatistics",
    "RoomRow",
    "RoomSchedule",
    "TypeCount",
    "analyze_model",
    "category_counts",
    "color_splash",
    "level_statistics",
    "material_quantities",
    "number_rooms",
    "room_schedule",
    "type_breakdown",
    "untagged_rooms",
]
