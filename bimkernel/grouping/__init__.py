"""Grouping — ordered buckets with idempotent membership and summed metrics."""

from bimkernel.grouping.accumulator import (
    GroupingAccumulator,
    by_attribute,
    entity_identity,
    group_entities,
    metric,
)

__all__ = [
    "GroupingAccumulator",
    "by_attribute",
    "entity_identity",
    "group_entities",
    "metric",
]
