"""Model statistics — element counts by category, type and level."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, Field

from bimkernel.grouping.accumulator import GroupingAccumulator, by_attribute
from bimkernel.models.entity import AttributeSource

logger = logging.getLogger(__name__)


class TypeCount(BaseModel):
    """Instance count of one family type."""

    family_name: str = ""
    type_name: str
    count: int = 0


class LevelCount(BaseModel):
    """A level and how many elements sit on it."""

    level_id: Any
    name: str = ""
    elevation: float = 0.0
    element_count: int = 0


class ModelStatistics(BaseModel):
    """Summary of a model's element population."""

    categories: dict[str, int] = Field(default_factory=dict)
    types: dict[str, TypeCount] = Field(default_factory=dict)
    family_names: list[str] = Field(default_factory=list)
    levels: list[LevelCount] = Field(default_factory=list)

    @property
    def categorized_total(self) -> int:
        return sum(self.categories.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "categories": dict(self.categories),
            "categorized_total": self.categorized_total,
            "types": {key: t.model_dump(mode="json") for key, t in self.types.items()},
            "family_names": list(self.family_names),
            "levels": [lvl.model_dump(mode="json") for lvl in self.levels],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_markdown(self) -> str:
        lines: list[str] = []

        lines.append("# Model Statistics")
        lines.append("")
        lines.append(f"**Categorized elements:** {self.categorized_total}")
        lines.append("")

        if self.categories:
            lines.append("## Categories")
            lines.append("")
            lines.append("| Category | Count |")
            lines.append("|----------|-------|")
            for name, count in self.categories.items():
                lines.append(f"| {name} | {count} |")
            lines.append("")

        if self.types:
            lines.append("## Types")
            lines.append("")
            lines.append("| Family | Type | Count |")
            lines.append("|--------|------|-------|")
            for t in self.types.values():
                lines.append(f"| {t.family_name} | {t.type_name} | {t.count} |")
            lines.append("")

        if self.levels:
            lines.append("## Levels")
            lines.append("")
            lines.append("| Level | Elevation | Elements |")
            lines.append("|-------|-----------|----------|")
            for lvl in self.levels:
                lines.append(f"| {lvl.name} | {lvl.elevation:.2f} | {lvl.element_count} |")
            lines.append("")

        return "\n".join(lines)


def category_counts(entities: Iterable[AttributeSource]) -> dict[str, int]:
    """Element count per category name.  Uncategorised elements are left out."""
    acc = GroupingAccumulator(by_attribute("category")).extend(entities)
    return acc.counts()


def type_breakdown(
    entities: Iterable[AttributeSource],
) -> tuple[dict[str, TypeCount], list[str]]:
    """Instance counts keyed ``"family:type"``, plus the family names seen.

    Only elements with a non-empty type name are counted.
    """
    types: dict[str, TypeCount] = {}
    families: dict[str, None] = {}

    for entity in entities:
        family = entity.get_string("family_name") or ""
        type_name = entity.get_string("type_name") or ""
        if family:
            families[family] = None
        if not type_name:
            continue
        key = f"{family}:{type_name}"
        entry = types.get(key)
        if entry is None:
            entry = TypeCount(family_name=family, type_name=type_name)
            types[key] = entry
        entry.count += 1

    return types, list(families)


def level_statistics(
    levels: Iterable[AttributeSource],
    entities: Iterable[AttributeSource],
) -> list[LevelCount]:
    """Levels ordered by elevation, each with its element count.

    An element belongs to the level whose id matches its ``level_id``.
    """
    acc = GroupingAccumulator(by_attribute("level_id")).extend(entities)
    counts = acc.counts()

    ordered = sorted(levels, key=lambda lvl: lvl.get_number("elevation") or 0.0)
    return [
        LevelCount(
            level_id=lvl.entity_id,
            name=lvl.get_string("name") or "",
            elevation=lvl.get_number("elevation") or 0.0,
            element_count=counts.get(str(lvl.entity_id), 0),
        )
        for lvl in ordered
    ]


def analyze_model(
    entities: Sequence[AttributeSource],
    levels: Iterable[AttributeSource] = (),
) -> ModelStatistics:
    """Run every statistic over *entities* and return one summary."""
    types, families = type_breakdown(entities)
    stats = ModelStatistics(
        categories=category_counts(entities),
        types=types,
        family_names=families,
        levels=level_statistics(levels, entities),
    )
    logger.info(
        "Analyzed %d elements: %d categories, %d types, %d levels",
        len(entities), len(stats.categories), len(stats.types), len(stats.levels),
    )
    return stats
