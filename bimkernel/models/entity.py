"""Entity access and result types.

The kernel never touches host objects directly.  Every entity it sees is
read through an :class:`AttributeSource`; everything it returns is plain
data the caller writes back under its own transaction.
"""

from __future__ import annotations

import abc
from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class AttributeSource(abc.ABC):
    """Read-only view of a host-owned entity.

    Concrete adapters exist per entity category (room, wall, level ...).
    Accessors must not raise; an unknown or empty attribute reads as ``None``.
    """

    @property
    @abc.abstractmethod
    def entity_id(self) -> Hashable:
        """Stable identity of the entity within its document."""

    @abc.abstractmethod
    def get_string(self, name: str) -> str | None:
        """Return attribute *name* as text, or None."""

    @abc.abstractmethod
    def get_number(self, name: str) -> float | None:
        """Return attribute *name* as a number, or None."""


class RecordSource(AttributeSource):
    """AttributeSource over a plain mapping of attribute values."""

    def __init__(self, entity_id: Hashable, attributes: Mapping[str, Any] | None = None) -> None:
        self._entity_id = entity_id
        self.attributes = dict(attributes or {})

    @property
    def entity_id(self) -> Hashable:
        return self._entity_id

    def get_string(self, name: str) -> str | None:
        value = self.attributes.get(name)
        if value is None:
            return None
        return str(value)

    def get_number(self, name: str) -> float | None:
        value = self.attributes.get(name)
        if value is None or isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    def __repr__(self) -> str:
        return f"RecordSource({self._entity_id!r}, {self.attributes!r})"


class RGB(BaseModel):
    """An 8-bit-per-channel colour."""

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)

    @classmethod
    def of(cls, red: int, green: int, blue: int) -> RGB:
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def from_hex(cls, value: str) -> RGB:
        """Parse ``#RRGGBB`` (the leading ``#`` is optional)."""
        text = value.strip().lstrip("#")
        if len(text) != 6:
            raise ValueError(f"Not a #RRGGBB colour: {value!r}")
        try:
            return cls.of(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError as exc:
            raise ValueError(f"Not a #RRGGBB colour: {value!r}") from exc

    @classmethod
    def coerce(cls, value: Any) -> RGB:
        """Accept an RGB, a 3-sequence of ints, or a hex string."""
        if isinstance(value, RGB):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, Sequence) and len(value) == 3:
            return cls.of(*value)
        raise ValueError(f"Cannot interpret {value!r} as a colour")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


class IdentifierCandidate(BaseModel):
    """A candidate identifier split around its trailing digit run."""

    model_config = ConfigDict(frozen=True)

    prefix: str = ""
    numeric_span: str = ""
    suffix: str = ""

    @property
    def original(self) -> str:
        return self.prefix + self.numeric_span + self.suffix

    @property
    def has_number(self) -> bool:
        return bool(self.numeric_span)


class GroupBucket(BaseModel):
    """One distinct grouping key, its members and accumulated metrics.

    Membership is a set kept in insertion order: adding a member that is
    already present leaves the members and count unchanged, but its metric
    values are still added.
    """

    key: str
    member_ids: list[Any] = Field(default_factory=list)
    metrics: dict[str, float] = Field(default_factory=dict)

    _seen: set[Any] = PrivateAttr(default_factory=set)

    def model_post_init(self, __context: Any) -> None:
        unique: list[Any] = []
        for member_id in self.member_ids:
            if member_id not in self._seen:
                self._seen.add(member_id)
                unique.append(member_id)
        self.member_ids = unique

    @property
    def count(self) -> int:
        return len(self.member_ids)

    def __contains__(self, member_id: Any) -> bool:
        return member_id in self._seen

    def add(self, member_id: Any, values: Mapping[str, float] | None = None) -> bool:
        """Add *member_id* and its metric *values*.

        Returns False when the member was already present; its values are
        summed either way.
        """
        for name, value in (values or {}).items():
            self.metrics[name] = self.metrics.get(name, 0.0) + value
        if member_id in self._seen:
            return False
        self._seen.add(member_id)
        self.member_ids.append(member_id)
        return True

    def metric(self, name: str) -> float:
        return self.metrics.get(name, 0.0)


class ColorAssignment(BaseModel):
    """Ordered key -> colour table.

    ``missing`` lists keys that received no colour because the discrete
    palette ran out; a lookup of such a key returns None from :meth:`get`.
    """

    colors: dict[str, RGB] = Field(default_factory=dict)
    missing: list[str] = Field(default_factory=list)

    def __contains__(self, key: object) -> bool:
        return key in self.colors

    def __getitem__(self, key: str) -> RGB:
        return self.colors[key]

    def __len__(self) -> int:
        return len(self.colors)

    def get(self, key: str, default: RGB | None = None) -> RGB | None:
        return self.colors.get(key, default)

    def keys(self) -> list[str]:
        return list(self.colors)

    @property
    def complete(self) -> bool:
        return not self.missing

    def to_hex_map(self) -> dict[str, str]:
        return {key: color.to_hex() for key, color in self.colors.items()}
