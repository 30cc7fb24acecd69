"""
Tests for core/parlay.py and services/parlay_calculator.py

Run with: pytest tests/test_parlay.py -v
"""

import pytest

from paperbet.core.parlay import combine_legs
from paperbet.services.parlay_calculator import (
    DUPLICATE_LEG_IDS,
    INVALID_LEG_ODDS,
    INVALID_WAGER,
    TOO_FEW_LEGS,
    ParlayLeg,
    calculate,
    new_leg,
    validate_inputs,
)


def _legs(*odds):
    return [ParlayLeg(id=str(i + 1), odds=o) for i, o in enumerate(odds)]


class TestCombineLegs:
    """Pure parlay pricing."""

    def test_two_leg_parlay(self):
        """-110 and +150 with 100 wagered."""
        result = combine_legs([-110, 150], 100.0)

        assert result.combined_decimal_odds == pytest.approx(4.773, abs=0.001)
        assert result.combined_american_odds == 377
        assert result.total_payout == pytest.approx(477.27, abs=0.01)
        assert result.profit == pytest.approx(377.27, abs=0.01)
        assert result.overall_probability == pytest.approx(20.95, abs=0.01)

    def test_individual_probabilities_keep_order(self):
        result = combine_legs([150, -110, 200], 10.0)

        assert len(result.individual_probabilities) == 3
        assert result.individual_probabilities[0] == pytest.approx(40.0)
        assert result.individual_probabilities[1] == pytest.approx(52.38, abs=0.01)
        assert result.individual_probabilities[2] == pytest.approx(33.33, abs=0.01)

    def test_adding_a_leg_increases_price_and_payout(self):
        two = combine_legs([-110, 150], 50.0)
        three = combine_legs([-110, 150, -300], 50.0)

        assert three.combined_decimal_odds > two.combined_decimal_odds
        assert three.total_payout > two.total_payout

    def test_single_leg_rejected(self):
        with pytest.raises(ValueError):
            combine_legs([-110], 100.0)


class TestParlayValidation:
    """Form-level validation messages."""

    def test_valid_inputs(self):
        assert validate_inputs(_legs("-110", "+150"), "100") == {}

    def test_bad_wager(self):
        errors = validate_inputs(_legs("-110", "+150"), "0")
        assert errors == {"wager": INVALID_WAGER}

    def test_blank_legs_are_ignored(self):
        legs = _legs("-110", "", "+150", "   ")
        assert validate_inputs(legs, 100) == {}

    def test_too_few_filled_legs(self):
        errors = validate_inputs(_legs("-110", ""), 100)
        assert errors == {"legs": TOO_FEW_LEGS}

    def test_short_line_invalidates_ticket(self):
        """+50 parses but fails the strict magnitude check."""
        errors = validate_inputs(_legs("-110", "+50"), 100)
        assert errors == {"legs": INVALID_LEG_ODDS}

    def test_out_of_range_legs_invalidate_ticket(self):
        huge = "-1" + "0" * 19
        assert validate_inputs(_legs(huge, huge), 100) == {"legs": INVALID_LEG_ODDS}
        assert calculate(_legs(huge, huge), 100) is None

    def test_invalid_message_replaces_too_few(self):
        errors = validate_inputs(_legs("abc", ""), 100)
        assert errors == {"legs": INVALID_LEG_ODDS}

    def test_duplicate_ids(self):
        legs = [ParlayLeg(id="1", odds="-110"), ParlayLeg(id="1", odds="+150")]
        assert validate_inputs(legs, 100)["general"] == DUPLICATE_LEG_IDS


class TestParlayCalculate:

    def test_result_skips_blank_legs(self):
        legs = [
            ParlayLeg(id="1", odds="-110", description="Duke -4.5"),
            ParlayLeg(id="2", odds=""),
            ParlayLeg(id="3", odds="+150", description="UNC ML"),
        ]
        result = calculate(legs, "100")

        assert result is not None
        assert len(result.individual_probabilities) == 2
        assert result.individual_probabilities[1] == pytest.approx(40.0)
        assert result.total_payout == pytest.approx(477.27, abs=0.01)

    def test_heaviest_favourites_still_price(self):
        result = calculate(_legs("-1000000", "-1000000"), 100)

        assert result is not None
        assert result.combined_decimal_odds > 1.0
        assert result.combined_american_odds < -100

    def test_invalid_returns_none(self):
        assert calculate(_legs("-110", "+50"), 100) is None
        assert calculate(_legs("-110", "+150"), "abc") is None


class TestNewLeg:

    def test_next_id(self):
        assert new_leg(_legs("-110", "+150")).id == "3"

    def test_skips_taken_ids(self):
        legs = [ParlayLeg(id="1", odds=""), ParlayLeg(id="3", odds="")]
        leg = new_leg(legs, description="Over 145.5")
        assert leg.id not in {"1", "3"}
        assert leg.odds == ""
        assert leg.description == "Over 145.5"
