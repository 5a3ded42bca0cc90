"""Named palettes for discrete colour assignment."""

from __future__ import annotations

from bimkernel.config import DEFAULT_COLOR
from bimkernel.models.entity import RGB

# Distinct, print-safe fills for category overrides
CATEGORY_PALETTE: list[str] = [
    "#E6194B",      # red
    "#3CB44B",      # green
    "#4363D8",      # blue
    "#F58231",      # orange
    "#911EB4",      # purple
    "#42D4F4",      # cyan
    "#F032E6",      # magenta
    "#BFEF45",      # lime
    "#FABED4",      # pink
    "#469990",      # teal
    "#DCBEFF",      # lavender
    "#9A6324",      # brown
]

# Material fills (AEC convention)
MATERIAL_COLORS: dict[str, str] = {
    "concrete": "#808080",
    "steel": "#C0C0C0",
    "glass": "#ADD8E6",
    "wood": "#8B4513",
    "brick": "#B22222",
    "gypsum": "#F5F5DC",
    "insulation": "#FFD700",
    "masonry": "#CD853F",
}


def palette(colors: list[str] | None = None) -> list[RGB]:
    """Return *colors* (default: CATEGORY_PALETTE) as RGB values."""
    return [RGB.from_hex(c) for c in (CATEGORY_PALETTE if colors is None else colors)]


def material_color(material_name: str) -> RGB:
    """Colour for a material name, matched by keyword; grey when unknown."""
    lowered = material_name.lower()
    for keyword, color in MATERIAL_COLORS.items():
        if keyword in lowered:
            return RGB.from_hex(color)
    return RGB.from_hex(DEFAULT_COLOR)
