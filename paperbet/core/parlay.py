"""Parlay pricing — combine independent legs into a single price.

Pure functions only.  A parlay wins only if every leg wins, so the combined
decimal price is the product of the leg prices and the implied probability
of the ticket is ``1 / combined``.

Leg order is significant for display: ``individual_probabilities[i]``
belongs to the i-th leg passed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from paperbet.core.odds_math import (
    american_to_decimal,
    decimal_to_american,
    get_implied_probability,
)


@dataclass(frozen=True)
class ParlayResult:
    """Combined price and payout of a parlay ticket.

    ``overall_probability`` and ``individual_probabilities`` are percentages.
    """

    combined_decimal_odds: float
    combined_american_odds: int
    total_payout: float
    profit: float
    overall_probability: float
    individual_probabilities: tuple[float, ...]


def combine_legs(american_odds: Sequence[int], wager: float) -> ParlayResult:
    """Price a parlay from its legs' American odds.

    Args:
        american_odds: One American line per leg, in ticket order.
        wager: Amount staked on the whole ticket.

    Raises:
        ValueError: If fewer than two legs are supplied.

    Example: ``-110`` and ``+150`` with 100 wagered → combined 4.773
    (+377), payout 477.27, profit 377.27, overall probability 20.95 %.
    """
    if len(american_odds) < 2:
        raise ValueError(f"A parlay needs at least 2 legs, got {len(american_odds)}.")

    combined_decimal = 1.0
    individual_probabilities = []
    for odds in american_odds:
        combined_decimal *= american_to_decimal(odds)
        individual_probabilities.append(get_implied_probability(odds))

    total_payout = wager * combined_decimal
    return ParlayResult(
        combined_decimal_odds=combined_decimal,
        combined_american_odds=decimal_to_american(combined_decimal),
        total_payout=total_payout,
        profit=total_payout - wager,
        overall_probability=100.0 / combined_decimal,
        individual_probabilities=tuple(individual_probabilities),
    )
