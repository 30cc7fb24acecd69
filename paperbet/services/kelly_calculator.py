"""
Kelly criterion calculator service.

Validation deliberately differs from the arbitrage and parlay calculators:
if any required field is missing (either line, either price, or a
non-positive bankroll) the only error reported is a single generic
``general`` message.  Per-field messages appear only once every required
field has something in it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from paperbet.core.kelly import KellyResult, calculate_kelly
from paperbet.core.odds_math import parse_american_odds
from paperbet.services.validation import (
    GENERAL_KEY,
    Amount,
    ErrorMap,
    is_blank,
    parse_amount,
    positive_amount,
)

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Please fill in all required fields"
INVALID_ODDS = "Please enter valid American odds (e.g., +100, -110)"
INVALID_BANKROLL = "Please enter a valid positive bankroll amount"
INVALID_MAX_BET_PCT = "Please enter a valid percentage between 0.1% and 100%"
INVALID_KELLY_FRACTION = "Please enter a valid fraction between 0.1 and 1.0"


@dataclass(frozen=True)
class KellyInputs:
    """
    Raw Kelly form input.

    The two ``*_line`` fields (e.g. ``"-3.5"``) identify the market being
    compared.  They are required but do not enter the computation.
    """

    betting_book_line: str
    betting_book_odds: str
    sharp_book_line: str
    sharp_book_odds: str
    bankroll: Amount
    max_bet_percentage: Amount
    kelly_fraction: Amount


def validate_inputs(inputs: KellyInputs) -> ErrorMap:
    errors: ErrorMap = {}

    empty_fields = sum([
        is_blank(inputs.betting_book_line),
        is_blank(inputs.betting_book_odds),
        is_blank(inputs.sharp_book_line),
        is_blank(inputs.sharp_book_odds),
        positive_amount(inputs.bankroll) is None,
    ])
    if empty_fields >= 1:
        errors[GENERAL_KEY] = MISSING_FIELDS
        return errors

    if parse_american_odds(inputs.betting_book_odds) is None:
        errors["betting_book_odds"] = INVALID_ODDS
    if parse_american_odds(inputs.sharp_book_odds) is None:
        errors["sharp_book_odds"] = INVALID_ODDS

    if positive_amount(inputs.bankroll) is None:
        errors["bankroll"] = INVALID_BANKROLL

    max_bet_pct = parse_amount(inputs.max_bet_percentage)
    if max_bet_pct is None or not (0 < max_bet_pct <= 100):
        errors["max_bet_percentage"] = INVALID_MAX_BET_PCT

    fraction = parse_amount(inputs.kelly_fraction)
    if fraction is None or not (0 < fraction <= 1):
        errors["kelly_fraction"] = INVALID_KELLY_FRACTION

    return errors


def calculate(inputs: KellyInputs) -> Optional[KellyResult]:
    """Validate then size the bet; ``None`` while any error is present."""
    errors = validate_inputs(inputs)
    if errors:
        logger.debug("Kelly inputs invalid: %s", sorted(errors))
        return None

    result = calculate_kelly(
        betting_odds=parse_american_odds(inputs.betting_book_odds),
        sharp_odds=parse_american_odds(inputs.sharp_book_odds),
        bankroll=positive_amount(inputs.bankroll),
        max_bet_percentage=parse_amount(inputs.max_bet_percentage),
        kelly_fraction=parse_amount(inputs.kelly_fraction),
    )
    if result.max_bet_reached:
        logger.info(
            "Kelly stake capped at %.2f (uncapped %.2f)",
            result.final_bet_amount, result.recommended_bet_amount,
        )
    return result
