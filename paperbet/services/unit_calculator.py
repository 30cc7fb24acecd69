"""
"To win N units" calculator service.

Like the Kelly calculator, a missing field short-circuits to one generic
message.  Odds use the permissive parse only, so short lines such as
``+50`` are accepted here.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from paperbet.core.odds_math import parse_american_odds
from paperbet.core.units import UnitResult, calculate_units
from paperbet.services.validation import (
    GENERAL_KEY,
    Amount,
    ErrorMap,
    is_blank,
    parse_amount,
    positive_amount,
)

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Please fill in all fields"
INVALID_UNIT_SIZE = "Please enter a valid unit size"
INVALID_UNITS_TO_WIN = "Please enter valid units to win"
INVALID_ODDS = "Please enter valid odds (e.g. -120, +100, or 100)"


@dataclass(frozen=True)
class UnitInputs:
    unit_size: Amount
    units_to_win: Amount
    odds: str


def _missing(value: Amount) -> bool:
    number = parse_amount(value)
    return number is None or number == 0


def validate_inputs(inputs: UnitInputs) -> ErrorMap:
    errors: ErrorMap = {}

    if _missing(inputs.unit_size) or _missing(inputs.units_to_win) or is_blank(inputs.odds):
        errors[GENERAL_KEY] = MISSING_FIELDS
        return errors

    if positive_amount(inputs.unit_size) is None:
        errors["unit_size"] = INVALID_UNIT_SIZE
    if positive_amount(inputs.units_to_win) is None:
        errors["units_to_win"] = INVALID_UNITS_TO_WIN
    if parse_american_odds(inputs.odds) is None:
        errors["odds"] = INVALID_ODDS

    return errors


def calculate(inputs: UnitInputs) -> Optional[UnitResult]:
    errors = validate_inputs(inputs)
    if errors:
        logger.debug("Unit inputs invalid: %s", sorted(errors))
        return None
    return calculate_units(
        positive_amount(inputs.unit_size),
        positive_amount(inputs.units_to_win),
        parse_american_odds(inputs.odds),
    )
