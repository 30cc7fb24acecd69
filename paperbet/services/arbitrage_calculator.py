"""
Arbitrage / hedge calculator service.

Validates raw form input for one of two modes and, only when every field
is valid, runs the matching math from :mod:`paperbet.core.arbitrage`:

    arbitrage — split ``total_stake`` across side A and side B
    hedge     — size a side-B bet against an existing ``original_bet``

The inputs are a tagged union so each mode carries exactly the fields it
requires.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Union

from paperbet.core.arbitrage import (
    ArbitrageResult,
    HedgeOutcome,
    calculate_arbitrage,
    calculate_hedge,
)
from paperbet.core.odds_math import parse_american_odds
from paperbet.services.validation import Amount, ErrorMap, is_blank, positive_amount

logger = logging.getLogger(__name__)

INVALID_TOTAL_STAKE = "Please enter a valid total stake"
INVALID_ODDS = "Please enter valid odds"
INVALID_ORIGINAL_BET = "Please enter a valid original bet amount"
INVALID_ORIGINAL_ODDS = "Please enter valid original odds"
INVALID_HEDGE_ODDS = "Please enter valid hedge odds"


@dataclass(frozen=True)
class ArbitrageModeInputs:
    """Two-sided arbitrage: both prices and the total to distribute."""

    total_stake: Amount
    side_a_odds: str
    side_b_odds: str
    mode: Literal["arbitrage"] = "arbitrage"


@dataclass(frozen=True)
class HedgeModeInputs:
    """Hedge an existing bet; ``side_b_odds`` is the hedge price."""

    original_bet: Amount
    original_odds: str
    side_b_odds: str
    mode: Literal["hedge"] = "hedge"


ArbitrageInputs = Union[ArbitrageModeInputs, HedgeModeInputs]


def _odds_invalid(text: Optional[str]) -> bool:
    return is_blank(text) or parse_american_odds(text) is None


def validate_inputs(inputs: ArbitrageInputs) -> ErrorMap:
    """Per-field validation errors for the selected mode."""
    errors: ErrorMap = {}

    if isinstance(inputs, HedgeModeInputs):
        if positive_amount(inputs.original_bet) is None:
            errors["original_bet"] = INVALID_ORIGINAL_BET
        if _odds_invalid(inputs.original_odds):
            errors["original_odds"] = INVALID_ORIGINAL_ODDS
        if _odds_invalid(inputs.side_b_odds):
            errors["side_b_odds"] = INVALID_HEDGE_ODDS
        return errors

    if positive_amount(inputs.total_stake) is None:
        errors["total_stake"] = INVALID_TOTAL_STAKE
    if _odds_invalid(inputs.side_a_odds):
        errors["side_a_odds"] = INVALID_ODDS
    if _odds_invalid(inputs.side_b_odds):
        errors["side_b_odds"] = INVALID_ODDS
    return errors


def calculate(inputs: ArbitrageInputs) -> Optional[ArbitrageResult]:
    """
    Validate then compute.

    Returns:
        The allocation, or ``None`` while any validation error is present.
        A valid but unprofitable scenario still returns a full result with
        ``is_arbitrage=False``.
    """
    errors = validate_inputs(inputs)
    if errors:
        logger.debug("%s inputs invalid: %s", inputs.mode, sorted(errors))
        return None

    if isinstance(inputs, HedgeModeInputs):
        return _hedge(inputs).to_arbitrage_result()

    result = calculate_arbitrage(
        parse_american_odds(inputs.side_a_odds),
        parse_american_odds(inputs.side_b_odds),
        positive_amount(inputs.total_stake),
    )
    if result.is_arbitrage:
        logger.info("Arbitrage found: %.2f%% margin", result.profit_margin)
    return result


def calculate_hedge_outcome(inputs: HedgeModeInputs) -> Optional[HedgeOutcome]:
    """Full hedge breakdown (returns, margin, profitability) or ``None`` if invalid."""
    if validate_inputs(inputs):
        return None
    return _hedge(inputs)


def _hedge(inputs: HedgeModeInputs) -> HedgeOutcome:
    outcome = calculate_hedge(
        positive_amount(inputs.original_bet),
        parse_american_odds(inputs.original_odds),
        parse_american_odds(inputs.side_b_odds),
    )
    logger.debug(
        "Hedge stake %.2f, guaranteed win %.2f", outcome.hedge_stake, outcome.guaranteed_win
    )
    return outcome
