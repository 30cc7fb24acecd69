"""
Tests for core/kelly.py

Run with: pytest tests/test_kelly.py -v
"""

import itertools

import pytest

from paperbet.core.kelly import (
    KELLY_PRESETS,
    calculate_kelly,
    expected_value,
    kelly_criterion,
)


class TestKellyCriterion:
    """Full Kelly with probability and payout passed separately."""

    def test_positive_edge(self):
        assert kelly_criterion(0.55, 1.909) == pytest.approx(0.055, abs=0.001)

    def test_break_even_is_zero(self):
        assert kelly_criterion(0.40, 2.5) == pytest.approx(0.0)

    def test_negative_edge_is_negative(self):
        """No flooring at this level; the calculator floors the stake."""
        assert kelly_criterion(0.45, 1.909) < 0

    def test_argument_order_matters(self):
        """Swapping probability source and payout source changes the answer."""
        sharp_prob, betting_decimal = 0.5238, 2.05
        assert kelly_criterion(sharp_prob, betting_decimal) > 0
        assert kelly_criterion(1 / betting_decimal, 1 / sharp_prob) <= 0

    def test_rejects_no_payout(self):
        with pytest.raises(ValueError):
            kelly_criterion(0.6, 1.0)


class TestExpectedValue:

    def test_fair_bet_is_zero(self):
        assert expected_value(100.0, 0.5, 2.0) == pytest.approx(0.0)

    def test_positive_ev(self):
        # 0.6 * 100 - 0.4 * 100
        assert expected_value(100.0, 0.6, 2.0) == pytest.approx(20.0)

    def test_zero_stake(self):
        assert expected_value(0.0, 0.9, 5.0) == 0.0


class TestCalculateKelly:
    """End-to-end Kelly sizing between a betting book and a sharp book."""

    def test_negative_edge_recommends_nothing(self):
        """-110 at the betting book vs -105 at the sharp book."""
        result = calculate_kelly(-110, -105, 1000.0, 5.0, 0.25)

        assert result.betting_book_implied_prob == pytest.approx(52.38, abs=0.01)
        assert result.sharp_book_implied_prob == pytest.approx(51.22, abs=0.01)
        assert result.edge == pytest.approx(-1.16, abs=0.01)
        assert result.kelly_percentage < 0
        assert result.recommended_bet_amount == 0.0
        assert result.final_bet_amount == 0.0
        assert result.expected_value == pytest.approx(0.0)
        assert result.is_positive_edge is False
        assert result.max_bet_reached is False

    def test_positive_edge_quarter_kelly(self):
        """+105 at the betting book vs -110 at the sharp book."""
        result = calculate_kelly(105, -110, 1000.0, 5.0, 0.25)

        assert result.edge == pytest.approx(3.60, abs=0.01)
        assert result.kelly_percentage == pytest.approx(7.03, abs=0.01)
        assert result.recommended_bet_amount == pytest.approx(17.57, abs=0.01)
        assert result.final_bet_amount == pytest.approx(result.recommended_bet_amount)
        assert result.expected_value == pytest.approx(1.30, abs=0.01)
        assert result.is_positive_edge is True
        assert result.max_bet_reached is False

    def test_cap_binds(self):
        """Full Kelly wants ~70 but the cap is 5% of 1000."""
        result = calculate_kelly(105, -110, 1000.0, 5.0, 1.0)

        assert result.recommended_bet_amount == pytest.approx(70.29, abs=0.01)
        assert result.final_bet_amount == pytest.approx(50.0)
        assert result.max_bet_reached is True

    def test_expected_value_uses_capped_stake(self):
        capped = calculate_kelly(105, -110, 1000.0, 5.0, 1.0)
        sharp_prob = 1 / (100 / 110 + 1)
        assert capped.expected_value == pytest.approx(
            50.0 * (sharp_prob * 1.05 - (1 - sharp_prob))
        )

    @pytest.mark.parametrize(
        "betting,sharp,max_pct,fraction",
        list(itertools.product([-200, -110, 105, 150, 300], [-250, -120, -105, 110, 200], [1.0, 5.0, 100.0], [0.25, 1.0])),
    )
    def test_stake_bounds(self, betting, sharp, max_pct, fraction):
        result = calculate_kelly(betting, sharp, 2000.0, max_pct, fraction)

        assert result.recommended_bet_amount >= 0
        assert result.final_bet_amount <= 2000.0 * max_pct / 100
        assert result.final_bet_amount <= result.recommended_bet_amount
        assert result.is_positive_edge == (result.edge > 0)

    def test_idempotent(self):
        assert calculate_kelly(105, -110, 1000.0, 5.0, 0.5) == calculate_kelly(105, -110, 1000.0, 5.0, 0.5)


class TestPresets:

    def test_preset_values(self):
        assert sorted(KELLY_PRESETS.values()) == [0.25, 0.5, 0.75, 1.0]
