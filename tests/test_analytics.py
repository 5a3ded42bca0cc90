"""Tests for the command-level recipes: rooms, colour splash, materials, statistics."""

from __future__ import annotations

import json

import pytest

from bimkernel.analytics import (
    MaterialUsage,
    analyze_model,
    category_counts,
    color_splash,
    level_statistics,
    material_quantities,
    number_rooms,
    room_schedule,
    type_breakdown,
    untagged_rooms,
)
from bimkernel.models.entity import RGB, RecordSource
from bimkernel.numbering import TakenSet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _room(room_id: str, number: str | None = None, area: float | None = None, **extra) -> RecordSource:
    attrs = {"name": f"Room {room_id}", "number": number, "level": "Level 1", "area": area}
    attrs.update(extra)
    return RecordSource(room_id, attrs)


def _rooms() -> list[RecordSource]:
    return [
        _room("r1", "101", 20.0),
        _room("r2", "102", 15.5),
        _room("r3", "103", 0.0),
        _room("r4", None, None),
    ]


def _element(element_id: str, **attrs) -> RecordSource:
    return RecordSource(element_id, attrs)


# ---------------------------------------------------------------------------
# Room schedule
# ---------------------------------------------------------------------------

class TestRoomSchedule:
    """Room export with unplaced filtering."""

    def test_skips_unplaced(self):
        schedule = room_schedule(_rooms())
        assert [row.room_id for row in schedule.rows] == ["r1", "r2"]
        assert schedule.unplaced_skipped == 2
        assert schedule.total_area == pytest.approx(35.5)

    def test_include_unplaced(self):
        schedule = room_schedule(_rooms(), include_unplaced=True)
        assert len(schedule.rows) == 4
        assert schedule.unplaced_skipped == 0
        assert not schedule.rows[3].placed

    def test_fields_populated(self):
        row = room_schedule(_rooms()).rows[0]
        assert row.name == "Room r1"
        assert row.number == "101"
        assert row.level == "Level 1"
        assert row.area == 20.0

    def test_total_matches_sum_of_rows(self):
        schedule = room_schedule(_rooms(), include_unplaced=True)
        assert schedule.total_area == pytest.approx(sum(r.area for r in schedule.rows))

    def test_to_dict_serialisable(self):
        data = room_schedule(_rooms()).to_dict()
        assert data["room_count"] == 2
        json.dumps(data)


# ---------------------------------------------------------------------------
# Room numbering
# ---------------------------------------------------------------------------

class TestNumberRooms:
    """Batch numbering threads the caller's TakenSet."""

    def test_duplicates_renumbered(self):
        taken = TakenSet(["201"])
        rooms = [_room("a", "200"), _room("b", "200"), _room("c")]
        assigned = number_rooms(rooms, taken)
        assert assigned == [("a", "200"), ("b", "202"), ("c", "203")]
        assert {"200", "202", "203"} <= set(taken)

    def test_all_unique(self):
        taken = TakenSet()
        assigned = number_rooms([_room(str(i), "100") for i in range(10)], taken)
        numbers = [n for _, n in assigned]
        assert len(set(numbers)) == 10


# ---------------------------------------------------------------------------
# Tagging
# ---------------------------------------------------------------------------

class TestUntaggedRooms:
    """Selecting rooms that still need a tag."""

    def test_skips_tagged(self):
        result = untagged_rooms(_rooms(), tagged_ids=["r1", "r3"])
        assert [r.entity_id for r in result] == ["r2", "r4"]

    def test_specific_rooms(self):
        result = untagged_rooms(_rooms(), tagged_ids=[], room_ids=["r2"])
        assert [r.entity_id for r in result] == ["r2"]


# ---------------------------------------------------------------------------
# Colour splash
# ---------------------------------------------------------------------------

def _walls() -> list[RecordSource]:
    return [
        _element("w1", comments="Group A"),
        _element("w2", comments="Group A"),
        _element("w3", comments="Group B"),
        _element("w4"),
    ]


class TestColorSplash:
    """Grouping by parameter and colouring each value."""

    def test_groups_with_none_sentinel(self):
        result = color_splash(_walls(), "comments")
        assert [b.key for b in result.buckets] == ["Group A", "Group B", "None"]
        assert result.buckets[0].count == 2

    def test_gradient_default(self):
        result = color_splash(_walls(), "comments")
        assert result.mode == "gradient"
        assert result.assignment["Group A"].as_tuple() == (0, 0, 180)
        assert result.assignment["Group B"].as_tuple() == (90, 0, 90)
        assert result.assignment["None"].as_tuple() == (180, 0, 0)

    def test_element_colors(self):
        colors = color_splash(_walls(), "comments", palette=[(255, 0, 0), (0, 255, 0), (0, 0, 255)]).element_colors()
        assert colors["w1"] == RGB.of(255, 0, 0)
        assert colors["w2"] == RGB.of(255, 0, 0)
        assert colors["w3"] == RGB.of(0, 255, 0)
        assert colors["w4"] == RGB.of(0, 0, 255)

    def test_short_palette_leaves_elements_uncoloured(self):
        result = color_splash(_walls(), "comments", palette=["#FF0000", "#00FF00"])
        assert result.mode == "discrete"
        assert result.assignment.missing == ["None"]
        assert "w4" not in result.element_colors()
        assert result.legend()[2] == {"value": "None", "count": 1, "color": None}


# ---------------------------------------------------------------------------
# Material quantities
# ---------------------------------------------------------------------------

_USAGES = {
    "w1": [
        MaterialUsage(material_id="m1", name="Concrete", material_class="Concrete", area=10.0, volume=2.0),
        MaterialUsage(material_id="m2", name="Gypsum Wall Board", material_class="Gypsum", area=5.0, volume=0.1),
    ],
    "w2": [
        MaterialUsage(material_id="m1", name="Concrete", material_class="Concrete", area=4.0, volume=1.0),
    ],
    "w3": [],
}


def _usages(element: RecordSource) -> list[MaterialUsage]:
    return _USAGES[element.entity_id]


class TestMaterialQuantities:
    """Per-material roll-up across elements."""

    def test_rollup(self):
        walls = [_element("w1"), _element("w2"), _element("w3")]
        results = material_quantities(walls, _usages)
        assert [m.material_id for m in results] == ["m1", "m2"]
        concrete = results[0]
        assert concrete.name == "Concrete"
        assert concrete.area == pytest.approx(14.0)
        assert concrete.volume == pytest.approx(3.0)
        assert concrete.element_count == 2
        assert concrete.element_ids == ["w1", "w2"]
        assert concrete.color == "#808080"

    def test_repeated_element_counted_once(self):
        w1 = _element("w1")
        results = material_quantities([w1, w1], _usages)
        assert results[0].element_count == 1
        assert results[0].area == pytest.approx(20.0)

    def test_two_layers_of_one_material(self):
        layers = [
            MaterialUsage(material_id="gyp", name="Gypsum", area=5.0, volume=0.1),
            MaterialUsage(material_id="gyp", name="Gypsum", area=5.0, volume=0.1),
        ]
        results = material_quantities([_element("w9")], lambda element: layers)
        assert len(results) == 1
        assert results[0].element_count == 1
        assert results[0].element_ids == ["w9"]
        assert results[0].area == pytest.approx(10.0)
        assert results[0].volume == pytest.approx(0.2)

    def test_empty(self):
        assert material_quantities([], _usages) == []


# ---------------------------------------------------------------------------
# Model statistics
# ---------------------------------------------------------------------------

def _model() -> list[RecordSource]:
    return [
        _element("e1", category="Walls", level_id="L1"),
        _element("e2", category="Walls", level_id="L1"),
        _element("e3", category="Doors", level_id="L2", family_name="Single-Flush", type_name="36x84"),
        _element("e4", category="Doors", level_id="L1", family_name="Single-Flush", type_name="36x84"),
        _element("e5", category="Furniture", family_name="Desk", type_name=""),
        _element("e6"),
    ]


def _levels() -> list[RecordSource]:
    return [
        _element("L2", name="Level 2", elevation=3.5),
        _element("L1", name="Level 1", elevation=0.0),
        _element("L3", name="Roof", elevation=7.0),
    ]


class TestModelStatistics:
    """Category, type and level breakdowns."""

    def test_category_counts(self):
        counts = category_counts(_model())
        assert counts == {"Walls": 2, "Doors": 2, "Furniture": 1}

    def test_grouped_total_matches_categorised(self):
        model = _model()
        categorised = [e for e in model if e.get_string("category") is not None]
        assert sum(category_counts(model).values()) == len(categorised)

    def test_type_breakdown(self):
        types, families = type_breakdown(_model())
        assert list(types) == ["Single-Flush:36x84"]
        assert types["Single-Flush:36x84"].count == 2
        assert families == ["Single-Flush", "Desk"]

    def test_levels_ordered_by_elevation(self):
        levels = level_statistics(_levels(), _model())
        assert [lvl.name for lvl in levels] == ["Level 1", "Level 2", "Roof"]
        assert [lvl.element_count for lvl in levels] == [3, 1, 0]

    def test_analyze_model(self):
        stats = analyze_model(_model(), _levels())
        assert stats.categorized_total == 5
        data = stats.to_dict()
        assert data["categories"]["Walls"] == 2
        json.loads(stats.to_json())

    def test_markdown(self):
        md = analyze_model(_model(), _levels()).to_markdown()
        assert md.startswith("# Model Statistics")
        assert "## Categories" in md
        assert "| Walls | 2 |" in md
        assert "| Level 1 | 0.00 | 3 |" in md
