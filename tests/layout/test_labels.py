"""Tests for outside label placement."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jobcharts.layout import CategoricalDatum, Side, layout_wedges, place_labels
from jobcharts.layout.labels import resolve_collisions, side_for_angle


class TestLabelPlacement:
    """Verify labels never collide on one side so crowded donuts stay readable."""

    @given(
        raw=st.lists(st.integers(min_value=1, max_value=1000), min_size=1, max_size=20),
        spacing=st.floats(min_value=1.0, max_value=40.0),
    )
    def test_same_side_labels_respect_spacing(self, raw: list[int], spacing: float) -> None:
        wedges = layout_wedges([CategoricalDatum(f"l{i}", v) for i, v in enumerate(raw)])

        labels = place_labels(
            wedges,
            label_radius=156.0,
            min_slice_angle=0.0,
            min_vertical_spacing=spacing,
        )

        for side in Side:
            ys = sorted(label.anchor_y for label in labels if label.side is side)
            for upper, lower in zip(ys, ys[1:]):
                assert lower - upper >= spacing - 1e-9

    def test_thin_slices_are_skipped(self) -> None:
        wedges = layout_wedges([CategoricalDatum("big", 999), CategoricalDatum("tiny", 1)])

        labels = place_labels(
            wedges, label_radius=150.0, min_slice_angle=0.1, min_vertical_spacing=18.0
        )

        assert [label.key for label in labels] == ["big"]

    def test_labels_align_on_side_columns(self) -> None:
        wedges = layout_wedges([CategoricalDatum("right", 1), CategoricalDatum("left", 1)], pad_angle=0)

        labels = {
            label.key: label
            for label in place_labels(
                wedges,
                label_radius=150.0,
                min_slice_angle=0.1,
                min_vertical_spacing=18.0,
                center=(200.0, 200.0),
            )
        }

        assert labels["right"].side is Side.RIGHT
        assert labels["right"].anchor_x == pytest.approx(200.0 + 165.0)
        assert labels["left"].side is Side.LEFT
        assert labels["left"].anchor_x == pytest.approx(200.0 - 165.0)

    def test_connector_runs_from_edge_to_anchor(self) -> None:
        wedges = layout_wedges([CategoricalDatum("only", 1)])

        (label,) = place_labels(
            wedges,
            label_radius=150.0,
            min_slice_angle=0.1,
            min_vertical_spacing=18.0,
            edge_radius=120.0,
        )
        edge, bend, anchor = label.connector

        assert math.hypot(*edge) == pytest.approx(120.0)
        assert anchor == (label.anchor_x, label.anchor_y)
        assert bend == pytest.approx(((edge[0] + anchor[0]) / 2, (edge[1] + anchor[1]) / 2))


class TestCollisionHelpers:
    """Verify the greedy pass only ever pushes labels downward."""

    def test_resolve_collisions_pushes_down(self) -> None:
        assert resolve_collisions([0.0, 5.0, 40.0], 18.0) == [0.0, 18.0, 40.0]

    def test_side_for_angle(self) -> None:
        assert side_for_angle(0.5) is Side.RIGHT
        assert side_for_angle(math.pi + 0.5) is Side.LEFT
