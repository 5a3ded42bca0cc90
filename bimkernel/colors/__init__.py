"""Colour mapping — discrete palettes and linear gradients over group keys."""

from bimkernel.colors.mapper import (
    ColorMapper,
    assign_discrete,
    assign_gradient,
    interpolate,
)
from bimkernel.colors.palette import CATEGORY_PALETTE, material_color, palette

__all__ = [
    "CATEGORY_PALETTE",
    "ColorMapper",
    "assign_discrete",
    "assign_gradient",
    "interpolate",
    "material_color",
    "palette",
]
