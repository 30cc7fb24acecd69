"""
Multi-format odds converter.

Given a price typed in any one format, fill in the other three.  Only the
permissive American parse is applied: the converter is a display tool and
shows lines such as ``+50`` rather than rejecting them.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Literal, Optional, Tuple

from paperbet.core.odds_math import (
    MAX_DECIMAL_ODDS,
    MIN_DECIMAL_ODDS,
    american_to_decimal,
    decimal_to_american,
    decimal_to_fractional,
    decimal_to_implied_probability,
    fractional_to_decimal,
    implied_to_decimal,
    parse_american_odds,
    stake_payout,
)
from paperbet.services.validation import Amount, parse_amount, positive_amount

logger = logging.getLogger(__name__)

OddsFormat = Literal["american", "decimal", "fractional", "implied"]


@dataclass(frozen=True)
class OddsQuote:
    """One price in all four formats.  ``implied_probability`` is in %."""

    american: int
    decimal: float
    fractional: str
    implied_probability: float


def _quote(decimal_odds: float, american: Optional[int] = None,
           fractional: Optional[str] = None) -> Optional[OddsQuote]:
    # Outside the quotable American range the conversions overflow.
    if not MIN_DECIMAL_ODDS <= decimal_odds <= MAX_DECIMAL_ODDS:
        return None
    return OddsQuote(
        american=decimal_to_american(decimal_odds) if american is None else american,
        decimal=decimal_odds,
        fractional=decimal_to_fractional(decimal_odds) if fractional is None else fractional,
        implied_probability=decimal_to_implied_probability(decimal_odds) * 100.0,
    )


def convert_from_american(text: str) -> Optional[OddsQuote]:
    american = parse_american_odds(text)
    if american is None:
        return None
    return _quote(american_to_decimal(american), american=american)


def convert_from_decimal(text: Amount) -> Optional[OddsQuote]:
    decimal_odds = parse_amount(text)
    if decimal_odds is None:
        return None
    return _quote(decimal_odds)


def convert_from_fractional(text: str) -> Optional[OddsQuote]:
    if not text or "/" not in text:
        return None
    # A malformed string decodes to 1.0, which falls below the quotable range.
    decimal_odds = fractional_to_decimal(text.strip())
    return _quote(decimal_odds, fractional=text.strip())


def convert_from_implied(text: Amount) -> Optional[OddsQuote]:
    """``text`` is an implied probability in percent, strictly between 0 and 100."""
    implied = parse_amount(text)
    if implied is None or not (0 < implied < 100):
        return None
    return _quote(implied_to_decimal(implied))


_CONVERTERS: Dict[str, Callable[..., Optional[OddsQuote]]] = {
    "american": convert_from_american,
    "decimal": convert_from_decimal,
    "fractional": convert_from_fractional,
    "implied": convert_from_implied,
}


def convert(value: Amount, source: OddsFormat) -> Optional[OddsQuote]:
    """Dispatch on the format the user typed in."""
    if source not in _CONVERTERS:
        raise ValueError(f"Unknown odds format {source!r}")
    if source in ("american", "fractional") and not isinstance(value, str):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        value = "" if value is None else str(value)
    quote = _CONVERTERS[source](value)
    if quote is None:
        logger.debug("Could not convert %r from %s", value, source)
    return quote


def quote_payout(stake: Amount, quote: OddsQuote) -> Tuple[float, float]:
    """``(to_win, payout)`` for ``stake`` at ``quote``; zeros for a bad stake."""
    amount = positive_amount(stake)
    if amount is None:
        return 0.0, 0.0
    return stake_payout(amount, quote.decimal)
