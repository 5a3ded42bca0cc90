"""Colour splash — colour elements by the value of one parameter.

Usage::

    from bimkernel.analytics import color_splash

    result = color_splash(walls, "comments")
    for element_id, color in result.element_colors().items():
        ...  # caller applies the override in its view
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Sequence
from typing import Any

from pydantic import BaseModel, Field

from bimkernel.colors.mapper import ColorMapper
from bimkernel.config import GRADIENT_END, GRADIENT_START, UNGROUPED_KEY
from bimkernel.grouping.accumulator import by_attribute, group_entities
from bimkernel.models.entity import RGB, AttributeSource, ColorAssignment, GroupBucket

logger = logging.getLogger(__name__)


class ColorSplashResult(BaseModel):
    """Buckets for one parameter and the colour of each bucket."""

    parameter: str
    mode: str
    buckets: list[GroupBucket] = Field(default_factory=list)
    assignment: ColorAssignment = Field(default_factory=ColorAssignment)

    def element_colors(self) -> dict[Hashable, RGB]:
        """Element id -> colour, for every element whose bucket is coloured."""
        colors: dict[Hashable, RGB] = {}
        for bucket in self.buckets:
            color = self.assignment.get(bucket.key)
            if color is None:
                continue
            for member_id in bucket.member_ids:
                colors[member_id] = color
        return colors

    def legend(self) -> list[dict[str, Any]]:
        entries: list[dict[str, Any]] = []
        for bucket in self.buckets:
            color = self.assignment.get(bucket.key)
            entries.append({
                "value": bucket.key,
                "count": bucket.count,
                "color": color.to_hex() if color is not None else None,
            })
        return entries


def color_splash(
    entities: Iterable[AttributeSource],
    parameter: str,
    palette: Sequence[Any] | None = None,
    start: Any = GRADIENT_START,
    end: Any = GRADIENT_END,
) -> ColorSplashResult:
    """Group *entities* by *parameter* and colour each distinct value.

    Entities without a value are grouped under ``"None"``.  A *palette*
    selects discrete colouring; otherwise values are spread along the
    gradient *start* -> *end*.
    """
    buckets = group_entities(entities, by_attribute(parameter, default=UNGROUPED_KEY))
    mapper = ColorMapper(palette, start, end)
    assignment = mapper.assign(bucket.key for bucket in buckets)

    logger.info(
        "Colour splash on %r: %d values, %s mode, %d uncoloured",
        parameter, len(buckets), mapper.mode, len(assignment.missing),
    )
    return ColorSplashResult(
        parameter=parameter,
        mode=mapper.mode,
        buckets=buckets,
        assignment=assignment,
    )
