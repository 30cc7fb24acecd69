"""Arbitrage and hedge stake math.

All functions here are **pure**: no I/O, no logging.

Two independent problems are solved:

1. :func:`calculate_arbitrage` — split a total stake across two sides priced
   at different books so that either outcome returns the same amount.
2. :func:`calculate_hedge` — given an existing bet, size an opposing bet that
   equalises the total payout of both outcomes.

Design decisions
----------------
* The arbitrage split never short-circuits.  When the implied probabilities
  sum to 1 or more there is no arbitrage, but the allocation is still
  computed and returned with ``is_arbitrage=False`` and a non-positive
  ``guaranteed_profit``.  "No arbitrage" is a result, not an error.
* Stakes are proportional to each side's share of the total implied
  probability: ``stake_i = (p_i / Σp) · total``.  Since ``p_i = 1/d_i`` the
  return ``stake_i · d_i = total / Σp`` is identical for every side.
* The hedge stake is ``(original_return − original_bet) / (hedge_decimal − 1)``,
  i.e. the hedge's *profit* matches the original bet's *profit*.  The
  reported guaranteed win is derived from that stake; do not substitute a
  different equalisation.

Run tests with::

    pytest tests/test_arbitrage.py -v
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from paperbet.core.odds_math import american_to_decimal


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HedgeResult:
    """Hedge summary attached to an :class:`ArbitrageResult` in hedge mode."""

    hedge_stake: float
    guaranteed_win: float
    max_possible_win: float


@dataclass(frozen=True)
class ArbitrageResult:
    """Stake allocation across two sides.

    In hedge mode side A is the original bet and side B the hedge, and
    ``hedge_result`` is populated.  ``profit_margin`` is a percentage.
    """

    side_a_stake: float
    side_b_stake: float
    side_a_return: float
    side_b_return: float
    guaranteed_profit: float
    profit_margin: float
    is_arbitrage: bool
    hedge_result: HedgeResult | None = None


@dataclass(frozen=True)
class HedgeOutcome:
    """Full hedge breakdown for an existing bet."""

    original_bet: float
    hedge_stake: float
    original_return: float
    hedge_return: float
    guaranteed_win: float
    max_possible_win: float
    profit_margin: float
    is_profitable: bool

    @property
    def total_invested(self) -> float:
        return self.original_bet + self.hedge_stake

    def to_arbitrage_result(self) -> ArbitrageResult:
        """Express the hedge as a two-sided allocation (A = original, B = hedge)."""
        return ArbitrageResult(
            side_a_stake=self.original_bet,
            side_b_stake=self.hedge_stake,
            side_a_return=self.original_return,
            side_b_return=self.hedge_return,
            guaranteed_profit=self.guaranteed_win,
            profit_margin=self.profit_margin,
            is_arbitrage=self.guaranteed_win > 0,
            hedge_result=HedgeResult(
                hedge_stake=self.hedge_stake,
                guaranteed_win=self.guaranteed_win,
                max_possible_win=self.max_possible_win,
            ),
        )


# ---------------------------------------------------------------------------
# n-way building blocks
# ---------------------------------------------------------------------------


def total_implied_probability(decimal_odds: Sequence[float]) -> float:
    """Sum of ``1/d`` over mutually exclusive outcomes.

    Below 1.0 a guaranteed profit exists; at or above 1.0 the book's margin
    exceeds any price discrepancy.
    """
    return sum(1.0 / d for d in decimal_odds)


def split_stakes(decimal_odds: Sequence[float], total_stake: float) -> list[float]:
    """Split ``total_stake`` so every outcome returns the same amount.

    Args:
        decimal_odds: Best available decimal price for each outcome, in order.
        total_stake: Amount to distribute across all outcomes.

    Returns:
        Stakes in the same order as ``decimal_odds``; they sum to
        ``total_stake``.

    Raises:
        ValueError: If fewer than two outcomes are given.
    """
    if len(decimal_odds) < 2:
        raise ValueError(
            f"An arbitrage needs at least two outcomes, got {len(decimal_odds)}."
        )
    implied = [1.0 / d for d in decimal_odds]
    total_implied = sum(implied)
    return [(p / total_implied) * total_stake for p in implied]


# ---------------------------------------------------------------------------
# Two-way arbitrage
# ---------------------------------------------------------------------------


def calculate_arbitrage(
    side_a_odds: int,
    side_b_odds: int,
    total_stake: float,
) -> ArbitrageResult:
    """Allocate ``total_stake`` across two American-priced sides.

    Example: ``+150`` / ``-130`` with 1000 staked gives implied 0.400 +
    0.565 = 0.965 < 1, stakes ≈ 414.5 / 585.5, both returns ≈ 1036 and a
    guaranteed profit ≈ 36 (3.6 %).
    """
    decimal_a = american_to_decimal(side_a_odds)
    decimal_b = american_to_decimal(side_b_odds)

    is_arbitrage = total_implied_probability((decimal_a, decimal_b)) < 1.0
    stake_a, stake_b = split_stakes((decimal_a, decimal_b), total_stake)

    return_a = stake_a * decimal_a
    return_b = stake_b * decimal_b

    guaranteed_profit = min(return_a, return_b) - total_stake
    return ArbitrageResult(
        side_a_stake=stake_a,
        side_b_stake=stake_b,
        side_a_return=return_a,
        side_b_return=return_b,
        guaranteed_profit=guaranteed_profit,
        profit_margin=(guaranteed_profit / total_stake) * 100.0,
        is_arbitrage=is_arbitrage,
    )


# ---------------------------------------------------------------------------
# Hedge
# ---------------------------------------------------------------------------


def calculate_hedge(
    original_bet: float,
    original_odds: int,
    hedge_odds: int,
) -> HedgeOutcome:
    """Size a hedge against an existing bet.

    Args:
        original_bet: Stake already placed.
        original_odds: American price of the original bet.
        hedge_odds: American price available on the opposing side.

    Returns:
        :class:`HedgeOutcome`.  ``guaranteed_win`` is the worst-case net
        result after both stakes; ``max_possible_win`` the better of the two
        one-sided outcomes net of the other stake.
    """
    original_decimal = american_to_decimal(original_odds)
    hedge_decimal = american_to_decimal(hedge_odds)

    original_return = original_bet * original_decimal
    hedge_stake = (original_return - original_bet) / (hedge_decimal - 1.0)
    hedge_return = hedge_stake * hedge_decimal

    total_invested = original_bet + hedge_stake
    guaranteed_win = min(original_return, hedge_return) - total_invested
    max_possible_win = max(
        original_return - hedge_stake,
        hedge_return - original_bet,
    )

    return HedgeOutcome(
        original_bet=original_bet,
        hedge_stake=hedge_stake,
        original_return=original_return,
        hedge_return=hedge_return,
        guaranteed_win=guaranteed_win,
        max_possible_win=max_possible_win,
        profit_margin=(guaranteed_win / total_invested) * 100.0,
        is_profitable=guaranteed_win > 0,
    )
