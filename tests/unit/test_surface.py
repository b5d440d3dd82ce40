"""Tests for surface scale generation and its uniqueness guarantee."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tonal.core.colors import parse_color
from tonal.core.contrast import relative_luminance
from tonal.core.surface import make_surface_swatches, step_progress

channel = st.integers(min_value=0, max_value=255)
hex_colors = st.tuples(channel, channel, channel).map(
    lambda c: "#{:02x}{:02x}{:02x}".format(*c)
)


def _luminances(swatches):
    return [relative_luminance(parse_color(s.color)) for s in swatches]


class TestStepProgress:
    def test_endpoints(self):
        assert step_progress(0, 10) == 0.0
        assert step_progress(9, 10) == pytest.approx(0.76)

    def test_knee(self):
        # t = 0.6 lands exactly on the knee of the curve
        assert step_progress(3, 6) == pytest.approx(0.6)

    def test_front_loaded(self):
        first = step_progress(1, 10) - step_progress(0, 10)
        last = step_progress(9, 10) - step_progress(8, 10)
        assert first > last

    def test_degenerate(self):
        assert step_progress(0, 1) == 0.0
        assert step_progress(0, 0) == 0.0

    def test_monotonic(self):
        values = [step_progress(i, 10) for i in range(10)]
        assert values == sorted(values)


class TestSurfaceFixtures:
    def test_white_light_mode(self):
        swatches = make_surface_swatches("#ffffff", light_mode=True)
        assert len(swatches) == 10
        assert swatches[0].color == "rgba(255,255,255,1)"
        lum = _luminances(swatches)
        assert all(b <= a for a, b in zip(lum, lum[1:], strict=False))
        assert lum[-1] < lum[0] - 0.15

    def test_dark_mode_lightens(self):
        swatches = make_surface_swatches("#121212")
        assert swatches[0].color == "rgba(18,18,18,1)"
        lum = _luminances(swatches)
        assert lum[-1] > lum[0]

    def test_labels(self):
        assert [s.label for s in make_surface_swatches("#121212")] == [
            f"a{i * 10}" for i in range(10)
        ]

    def test_alpha_preserved(self):
        swatches = make_surface_swatches("rgba(20,20,30,0.5)")
        assert all(s.color.endswith(",0.5)") for s in swatches)

    def test_span_override(self):
        gentle = make_surface_swatches("#121212", dark_mode_lighten_span=0.5)
        default = make_surface_swatches("#121212")
        assert relative_luminance(parse_color(gentle[-1].color)) < relative_luminance(
            parse_color(default[-1].color)
        )

    def test_unparsable_falls_back_to_black(self, caplog):
        with caplog.at_level("WARNING", logger="tonal.core.surface"):
            swatches = make_surface_swatches("nope")
        assert swatches[0].color == "rgba(0,0,0,1)"
        assert len({s.color for s in swatches}) == 10
        assert "nope" in caplog.text

    def test_custom_count(self):
        swatches = make_surface_swatches("#121212", count=4)
        assert [s.label for s in swatches] == ["a0", "a30", "a60", "a90"]


class TestSurfaceUniqueness:
    @pytest.mark.parametrize("color", ["#000000", "#ffffff", "#fefefe", "#010101", "#ff0000"])
    @pytest.mark.parametrize("light_mode", [False, True])
    def test_extremes_unique(self, color: str, light_mode: bool):
        swatches = make_surface_swatches(color, light_mode)
        assert len({s.color for s in swatches}) == 10

    def test_black_dark_mode_climbs(self):
        swatches = make_surface_swatches("#000000")
        assert swatches[0].color == "rgba(0,0,0,1)"
        assert swatches[1].color == "rgba(1,1,1,1)"

    @given(hex_colors, st.booleans())
    @settings(max_examples=200)
    def test_pairwise_distinct(self, color: str, light_mode: bool) -> None:
        """Invariant: no two surface swatches render identically."""
        swatches = make_surface_swatches(color, light_mode)
        assert len(swatches) == 10
        assert len({s.color for s in swatches}) == 10
