"""GroupingAccumulator — partition entities by key and sum metrics per group.

Usage::

    from bimkernel.grouping import by_attribute, group_entities, metric

    buckets = group_entities(
        walls,
        by_attribute("comments"),
        {"area": metric("area")},
    )

Buckets come back in the order their keys were first seen.  Grouping keys
are case-sensitive.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from bimkernel.models.entity import AttributeSource, GroupBucket

logger = logging.getLogger(__name__)

KeyFn = Callable[[Any], "str | None"]
MetricFn = Callable[[Any], float]


def entity_identity(entity: Any) -> Hashable:
    """Identity used for set membership: ``entity_id`` when available."""
    if isinstance(entity, AttributeSource):
        return entity.entity_id
    return entity


class GroupingAccumulator:
    """Incrementally build ordered :class:`GroupBucket` objects.

    Parameters
    ----------
    key_fn:
        Returns the grouping key for an entity, or None to leave it out.
    metric_fns:
        Metric name -> function returning the entity's contribution.
        Values are summed as-is; negatives are not clamped.
    id_fn:
        Returns the membership identity of an entity.
    """

    def __init__(
        self,
        key_fn: KeyFn | None = None,
        metric_fns: Mapping[str, MetricFn] | None = None,
        id_fn: Callable[[Any], Hashable] = entity_identity,
    ) -> None:
        self.key_fn = key_fn
        self.metric_fns = dict(metric_fns or {})
        self.id_fn = id_fn
        self._buckets: dict[str, GroupBucket] = {}
        self.skipped = 0

    def add(self, entity: Any) -> GroupBucket | None:
        """Place *entity* in the bucket for its key.  Returns that bucket."""
        if self.key_fn is None:
            raise TypeError("add() needs a key_fn; use add_to() for explicit keys")
        key = self.key_fn(entity)
        if key is None:
            self.skipped += 1
            return None
        values = {name: fn(entity) for name, fn in self.metric_fns.items()}
        return self.add_to(key, entity, values)

    def add_to(
        self,
        key: str,
        entity: Any,
        values: Mapping[str, float] | None = None,
    ) -> GroupBucket:
        """Place *entity* under an explicit *key* with explicit metric *values*."""
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = GroupBucket(key=key)
            self._buckets[key] = bucket
        bucket.add(self.id_fn(entity), values)
        return bucket

    def extend(self, entities: Iterable[Any]) -> GroupingAccumulator:
        for entity in entities:
            self.add(entity)
        return self

    def buckets(self) -> list[GroupBucket]:
        return list(self._buckets.values())

    def get(self, key: str) -> GroupBucket | None:
        return self._buckets.get(key)

    def __len__(self) -> int:
        return len(self._buckets)

    @property
    def total_count(self) -> int:
        return sum(bucket.count for bucket in self._buckets.values())

    def counts(self) -> dict[str, int]:
        return {key: bucket.count for key, bucket in self._buckets.items()}


def group_entities(
    entities: Iterable[Any],
    key_fn: KeyFn,
    metric_fns: Mapping[str, MetricFn] | None = None,
    id_fn: Callable[[Any], Hashable] = entity_identity,
) -> list[GroupBucket]:
    """Group *entities* by *key_fn* in first-seen key order."""
    acc = GroupingAccumulator(key_fn, metric_fns, id_fn).extend(entities)
    logger.debug(
        "Grouped %d entities into %d buckets (%d without key)",
        acc.total_count, len(acc), acc.skipped,
    )
    return acc.buckets()


def by_attribute(name: str, default: str | None = None) -> KeyFn:
    """Key function reading string attribute *name* from an AttributeSource.

    Entities without the attribute get *default* (None excludes them).
    """
    def key_fn(entity: AttributeSource) -> str | None:
        value = entity.get_string(name)
        return default if value is None else value

    return key_fn


def metric(name: str) -> MetricFn:
    """Metric function reading number attribute *name*; absent counts as 0."""
    def metric_fn(entity: AttributeSource) -> float:
        value = entity.get_number(name)
        return 0.0 if value is None else value

    return metric_fn
