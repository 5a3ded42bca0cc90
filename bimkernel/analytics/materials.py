"""Material quantity take-off — area, volume and element count per material."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from pydantic import BaseModel, Field

from bimkernel.colors.palette import material_color
from bimkernel.grouping.accumulator import GroupingAccumulator, entity_identity

logger = logging.getLogger(__name__)


class MaterialUsage(BaseModel):
    """How much of one material a single element carries."""

    material_id: str
    name: str = ""
    material_class: str = ""
    area: float = 0.0
    volume: float = 0.0


class MaterialQuantity(BaseModel):
    """Summed quantities for one material across all elements."""

    material_id: str
    name: str = ""
    material_class: str = ""
    area: float = 0.0
    volume: float = 0.0
    element_count: int = 0
    element_ids: list[Any] = Field(default_factory=list)
    color: str = ""


def material_quantities(
    elements: Iterable[Any],
    usages: Callable[[Any], Iterable[MaterialUsage]],
    id_fn: Callable[[Any], Hashable] | None = None,
) -> list[MaterialQuantity]:
    """Roll up material usage over *elements*.

    *usages* yields the materials of one element; an element may carry
    several.  Each element is counted once per material, but the
    quantities of every usage are summed.
    """
    acc = GroupingAccumulator(id_fn=id_fn or entity_identity)
    described: dict[str, MaterialUsage] = {}

    for element in elements:
        for usage in usages(element):
            described.setdefault(usage.material_id, usage)
            acc.add_to(
                usage.material_id,
                element,
                {"area": usage.area, "volume": usage.volume},
            )

    results: list[MaterialQuantity] = []
    for bucket in acc.buckets():
        first = described[bucket.key]
        results.append(MaterialQuantity(
            material_id=bucket.key,
            name=first.name,
            material_class=first.material_class,
            area=bucket.metric("area"),
            volume=bucket.metric("volume"),
            element_count=bucket.count,
            element_ids=list(bucket.member_ids),
            color=material_color(first.name).to_hex(),
        ))

    logger.info("Material take-off: %d materials", len(results))
    return results
