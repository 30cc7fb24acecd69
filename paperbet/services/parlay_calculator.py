"""
Parlay calculator service.

Legs with empty odds are ignored (a form may carry blank rows).  Every
non-empty leg must pass the strict American-odds check; one bad leg blocks
the whole ticket.  Leg order is preserved into the result's per-leg
probabilities.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from paperbet.core.odds_math import is_valid_american_odds, parse_american_odds
from paperbet.core.parlay import ParlayResult, combine_legs
from paperbet.services.validation import GENERAL_KEY, Amount, ErrorMap, is_blank, positive_amount

logger = logging.getLogger(__name__)

MIN_LEGS = 2

INVALID_WAGER = "Please enter a valid wager amount"
TOO_FEW_LEGS = "Please enter odds for at least 2 legs"
INVALID_LEG_ODDS = "Please enter valid American odds for all legs"
DUPLICATE_LEG_IDS = "Each leg must have a unique id"


@dataclass(frozen=True)
class ParlayLeg:
    """One selection on the ticket.  ``description`` is cosmetic."""

    id: str
    odds: str
    description: str = ""


def _filled_legs(legs: Sequence[ParlayLeg]) -> List[ParlayLeg]:
    return [leg for leg in legs if not is_blank(leg.odds)]


def _leg_is_valid(leg: ParlayLeg) -> bool:
    american = parse_american_odds(leg.odds)
    return american is not None and is_valid_american_odds(american)


def validate_inputs(legs: Sequence[ParlayLeg], wager: Amount) -> ErrorMap:
    errors: ErrorMap = {}

    if positive_amount(wager) is None:
        errors["wager"] = INVALID_WAGER

    ids = [leg.id for leg in legs]
    if len(ids) != len(set(ids)):
        errors[GENERAL_KEY] = DUPLICATE_LEG_IDS

    filled = _filled_legs(legs)
    if len(filled) < MIN_LEGS:
        errors["legs"] = TOO_FEW_LEGS
    # Shares the "legs" key: an invalid leg replaces the too-few message.
    if any(not _leg_is_valid(leg) for leg in filled):
        errors["legs"] = INVALID_LEG_ODDS

    return errors


def calculate(legs: Sequence[ParlayLeg], wager: Amount) -> Optional[ParlayResult]:
    """Validate then price the ticket; ``None`` while any error is present."""
    errors = validate_inputs(legs, wager)
    if errors:
        logger.debug("Parlay inputs invalid: %s", sorted(errors))
        return None

    filled = _filled_legs(legs)
    result = combine_legs(
        [parse_american_odds(leg.odds) for leg in filled],
        positive_amount(wager),
    )
    logger.debug(
        "%d-leg parlay @ %+d, payout %.2f",
        len(filled), result.combined_american_odds, result.total_payout,
    )
    return result


def new_leg(legs: Sequence[ParlayLeg], description: str = "") -> ParlayLeg:
    """Blank leg with the next free numeric id (``"1"``, ``"2"``, ...)."""
    taken = {leg.id for leg in legs}
    candidate = len(legs) + 1
    while str(candidate) in taken:
        candidate += 1
    return ParlayLeg(id=str(candidate), odds="", description=description)
