"""Tests for the hue calibration anchors, the anchor blender and step labels."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tonal.core.anchors import (
    ANCHOR_STEPS,
    ANCHORS,
    Anchor,
    blend_anchor_step,
    blend_anchors,
    hue_distance,
)
from tonal.core.labels import make_scale_labels

hues = st.floats(min_value=0.0, max_value=360.0, allow_nan=False)

SINGLE = (
    Anchor(
        hue=100.0,
        progress=(0.0, 0.2, 0.4, 0.6),
        chroma_ret=(1.0, 0.8, 0.6, 0.4),
        hue_shift=(0.0, 2.0, 4.0, 6.0),
    ),
)


class TestAnchorTable:
    def test_shape(self):
        assert ANCHOR_STEPS == 8
        for anchor in ANCHORS:
            assert len(anchor.progress) == ANCHOR_STEPS
            assert len(anchor.chroma_ret) == ANCHOR_STEPS
            assert len(anchor.hue_shift) == ANCHOR_STEPS

    def test_progress_increasing_and_near_normalization(self):
        for anchor in ANCHORS:
            assert list(anchor.progress) == sorted(anchor.progress)
            assert max(anchor.progress) == pytest.approx(0.88, abs=0.015)

    def test_chroma_retention_decreasing(self):
        for anchor in ANCHORS:
            assert list(anchor.chroma_ret) == sorted(anchor.chroma_ret, reverse=True)
            assert 0.0 < min(anchor.chroma_ret) < max(anchor.chroma_ret) < 1.0

    def test_one_anchor_per_reference_family(self):
        hues = [anchor.hue for anchor in ANCHORS]
        assert len(ANCHORS) == 7
        assert hues == sorted(hues)
        assert min(hue_distance(a, b) for a in hues for b in hues if a != b) > 30.0

    def test_hues_in_range(self):
        for anchor in ANCHORS:
            assert 0.0 <= anchor.hue < 360.0


class TestHueDistance:
    def test_simple(self):
        assert hue_distance(10.0, 40.0) == 30.0

    def test_wraps(self):
        assert hue_distance(350.0, 10.0) == 20.0
        assert hue_distance(10.0, 350.0) == 20.0

    @given(hues, hues)
    def test_bounded_and_symmetric(self, a: float, b: float) -> None:
        d = hue_distance(a, b)
        assert 0.0 <= d <= 180.0
        assert d == pytest.approx(hue_distance(b, a))


class TestBlend:
    def test_single_anchor_exact_step(self):
        step = blend_anchor_step(0.0, 2, SINGLE)
        assert step.progress == pytest.approx(0.4)
        assert step.chroma_ret == pytest.approx(0.6)
        assert step.hue_shift == pytest.approx(4.0)

    def test_fractional_index_interpolates(self):
        step = blend_anchor_step(100.0, 1.5, SINGLE)
        assert step.progress == pytest.approx(0.3)
        assert step.chroma_ret == pytest.approx(0.7)
        assert step.hue_shift == pytest.approx(3.0)

    def test_index_clamped(self):
        assert blend_anchor_step(0.0, 99, SINGLE).progress == pytest.approx(0.6)
        assert blend_anchor_step(0.0, -3, SINGLE).progress == pytest.approx(0.0)

    def test_ramp_position_maps_to_step_space(self):
        assert blend_anchors(100.0, 1.0, SINGLE) == blend_anchor_step(100.0, 3, SINGLE)
        assert blend_anchors(100.0, 0.5, SINGLE).progress == pytest.approx(0.3)

    def test_closest_anchor_dominates(self):
        # Violet drifts toward magenta while lightening, yellow toward orange
        assert blend_anchor_step(281.7, 4).hue_shift > 10.0
        assert blend_anchor_step(89.0, 4).hue_shift < 0

    def test_hue_wraps(self):
        assert blend_anchor_step(0.0, 3) == blend_anchor_step(360.0, 3)

    @given(hues, st.floats(min_value=0.0, max_value=1.0))
    def test_blend_within_anchor_envelope(self, hue: float, t: float) -> None:
        """Invariant: a weighted average never leaves the range of its inputs."""
        step = blend_anchors(hue, t)
        assert min(min(a.progress) for a in ANCHORS) - 1e-9 <= step.progress
        assert step.progress <= max(max(a.progress) for a in ANCHORS) + 1e-9
        assert 0.0 < step.chroma_ret <= 1.0


class TestScaleLabels:
    def test_ten(self):
        assert make_scale_labels(10) == [f"a{i * 10}" for i in range(10)]

    def test_four(self):
        assert make_scale_labels(4) == ["a0", "a30", "a60", "a90"]

    def test_rounding(self):
        assert make_scale_labels(3) == ["a0", "a45", "a90"]
        assert make_scale_labels(5) == ["a0", "a23", "a45", "a68", "a90"]

    def test_degenerate(self):
        assert make_scale_labels(0) == []
        assert make_scale_labels(-2) == []
        assert make_scale_labels(1) == ["a0"]
        assert make_scale_labels(2) == ["a0", "a90"]

    @given(st.integers(min_value=2, max_value=91))
    def test_strictly_increasing(self, count: int) -> None:
        labels = make_scale_labels(count)
        assert len(labels) == count
        values = [int(label[1:]) for label in labels]
        assert values[0] == 0
        assert values[-1] == 90
        assert values == sorted(set(values))
