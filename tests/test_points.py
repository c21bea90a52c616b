"""
Tests for XP points normalization

Tests cover:
- Global multiplier scaling
- Set-size normalization
- Junk input handling
"""

import pytest

from spellschool_app.modules.gamification.logics.points import (
    XP_MULTIPLIER,
    normalize_by_set_size,
    round_half_up,
    scale_points,
    session_xp,
    set_size_factor,
    to_number,
)


class TestRoundHalfUp:

    @pytest.mark.parametrize('value,expected', [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (2.4999, 2),
        (-2.5, -3),
        (0, 0),
    ])
    def test_halves_round_away_from_zero(self, value, expected):
        assert round_half_up(value) == expected


class TestScalePoints:
    """Test the global multiplier."""

    def test_default_multiplier(self):
        assert XP_MULTIPLIER == 0.25
        assert scale_points(100) == 25

    def test_negative_is_zero(self):
        assert scale_points(-5) == 0

    @pytest.mark.parametrize('raw', [None, float('nan'), float('inf'), 'abc', [], {}])
    def test_junk_is_zero(self, raw):
        assert scale_points(raw) == 0

    def test_rounds_half_up(self):
        assert scale_points(2) == 1  # 0.5
        assert scale_points(6) == 2  # 1.5
        assert scale_points(5) == 1  # 1.25

    def test_numeric_strings_are_accepted(self):
        assert scale_points('40') == 10

    def test_custom_multiplier(self):
        assert scale_points(10, multiplier=1.5) == 15

    def test_result_is_int(self):
        assert isinstance(scale_points(33.3), int)


class TestNormalizeBySetSize:
    """Big sets must not out-earn small ones."""

    def test_large_set_scaled_down(self):
        """factor = 10 / 50 = 0.2"""
        assert normalize_by_set_size(100, 50, 10) == 20

    def test_small_set_not_penalized(self):
        assert normalize_by_set_size(100, 5, 10) == 100

    def test_exact_target(self):
        assert normalize_by_set_size(100, 10, 10) == 100

    def test_default_target_is_ten(self):
        assert normalize_by_set_size(100, 20) == 50

    @pytest.mark.parametrize('item_count', [0, -3, None, 'many', float('nan')])
    def test_degenerate_item_count_treated_as_one(self, item_count):
        assert normalize_by_set_size(100, item_count, 10) == 100

    def test_fractional_item_count_is_floored(self):
        # floor(20.9) = 20 -> factor 0.5
        assert normalize_by_set_size(100, 20.9, 10) == 50

    def test_negative_raw_is_zero(self):
        assert normalize_by_set_size(-10, 5, 10) == 0

    def test_idempotent(self):
        assert normalize_by_set_size(77, 33, 10) == normalize_by_set_size(77, 33, 10)


class TestSetSizeFactor:

    def test_factor_never_exceeds_one(self):
        for items in (0, 1, 5, 10):
            assert set_size_factor(items, 10) == 1.0

    def test_factor_shrinks_with_set_size(self):
        assert set_size_factor(50, 10) == pytest.approx(0.2)
        assert set_size_factor(100, 10) == pytest.approx(0.1)


class TestSessionXp:

    def test_normalizes_then_scales(self):
        # 100 * 10/50 = 20, then 20 * 0.25 = 5
        assert session_xp(100, 50) == 5

    def test_small_set(self):
        assert session_xp(100, 4) == 25


class TestToNumber:

    def test_values(self):
        assert to_number('3.5') == 3.5
        assert to_number(True) == 1.0
        assert to_number(None) == 0.0
        assert to_number(float('-inf')) == 0.0
