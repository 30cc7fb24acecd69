"""Kelly criterion sizing — the single source of truth for bet sizing math.

All functions here are **pure**: no I/O, no logging.
Import from this module; never reimplement Kelly inside a calculator.

The calculator compares two books on the same market:

* the **betting book**, where the wager is actually placed and whose price
  sets the payout, and
* the **sharp book**, a reference market assumed to price the true win
  probability more accurately.

Design decisions
----------------
* **Probability and payout come from different books.**  The classical
  Kelly fraction ``f* = (b·p − q) / b`` is evaluated with ``p`` taken from
  the sharp book and ``b`` from the betting book.  :func:`kelly_criterion`
  takes the two as separate arguments so the asymmetry is visible at every
  call site; swapping them silently turns an edge into no edge.
* **Units.**  Probabilities, edges and Kelly fractions are 0–1 fractions
  inside this module.  They are converted to percentages in exactly one
  place, :func:`calculate_kelly`, when the :class:`KellyResult` is built.
* **Fractional Kelly** is a user-selected multiplier in ``(0, 1]``
  (0.25 = quarter Kelly).  A negative Kelly fraction floors the stake at 0;
  the calculator never recommends taking the other side.
* **Bankroll cap.**  The stake is clipped to ``max_bet_percentage`` of the
  bankroll.  ``max_bet_reached`` only fires when the cap actually bound a
  larger recommendation.

Run tests with::

    pytest tests/test_kelly.py -v
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from paperbet.core.odds_math import (
    american_to_decimal,
    decimal_to_implied_probability,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

#: Named fractional-Kelly presets offered by the calculator.
KELLY_PRESETS: Final[dict[str, float]] = {
    "Conservative (25%)": 0.25,
    "Moderate (50%)": 0.5,
    "Aggressive (75%)": 0.75,
    "Full Kelly (100%)": 1.0,
}


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KellyResult:
    """Kelly sizing for a single wager.

    Attributes:
        betting_book_implied_prob: Betting book's implied probability, in %.
        sharp_book_implied_prob: Sharp book's implied probability, in %.
        edge: ``sharp − betting`` implied probability, in percentage points.
        kelly_percentage: Full (unscaled) Kelly fraction, in % of bankroll.
        recommended_bet_amount: Fractional Kelly stake, floored at 0.
        final_bet_amount: ``recommended_bet_amount`` after the bankroll cap.
        expected_value: Expected profit of ``final_bet_amount``.
        is_positive_edge: ``edge > 0``.
        max_bet_reached: True when the cap reduced the recommendation.
    """

    betting_book_implied_prob: float
    sharp_book_implied_prob: float
    edge: float
    kelly_percentage: float
    recommended_bet_amount: float
    final_bet_amount: float
    expected_value: float
    is_positive_edge: bool
    max_bet_reached: bool


# ---------------------------------------------------------------------------
# Kelly math
# ---------------------------------------------------------------------------


def kelly_criterion(true_probability: float, payout_decimal_odds: float) -> float:
    """Full Kelly fraction of bankroll for a win/loss bet.

    Solves ``max_f E[log(1 + f·X)]`` where ``X`` pays ``b`` with probability
    ``p`` and ``−1`` otherwise::

        f*  =  (b · p − q) / b,    b = payout_decimal_odds − 1,  q = 1 − p

    Args:
        true_probability: Estimated true win probability, 0–1 fraction.
            In this application it comes from the *sharp* book.
        payout_decimal_odds: Decimal price the bet is actually struck at.
            In this application it comes from the *betting* book.

    Returns:
        The unscaled Kelly fraction.  Negative when the bet has negative
        expectation; callers decide how to floor it.

    Raises:
        ValueError: If ``payout_decimal_odds <= 1`` (no net payout).

    Examples::

        kelly_criterion(0.55, 1.909)  →  0.0550
        kelly_criterion(0.40, 2.500)  →  0.0000
    """
    if payout_decimal_odds <= 1.0:
        raise ValueError(
            f"payout_decimal_odds must be > 1.0, got {payout_decimal_odds!r}."
        )
    b = payout_decimal_odds - 1.0
    p = true_probability
    q = 1.0 - p
    return (b * p - q) / b


def expected_value(
    stake: float,
    true_probability: float,
    payout_decimal_odds: float,
) -> float:
    """Expected profit of ``stake`` given a win probability and a payout price.

    ``p · stake · (d − 1) + (1 − p) · (−stake)``, with the same
    probability/payout split as :func:`kelly_criterion`.
    """
    win_amount = stake * (payout_decimal_odds - 1.0)
    lose_amount = -stake
    return true_probability * win_amount + (1.0 - true_probability) * lose_amount


def calculate_kelly(
    betting_odds: int,
    sharp_odds: int,
    bankroll: float,
    max_bet_percentage: float,
    kelly_fraction: float,
) -> KellyResult:
    """Size a wager at ``betting_odds`` using ``sharp_odds`` as the true price.

    Args:
        betting_odds: American price at the book the bet is placed with.
        sharp_odds: American price at the reference (sharp) book.
        bankroll: Current bankroll, > 0.
        max_bet_percentage: Cap on any single stake as % of bankroll, in
            ``(0, 100]``.
        kelly_fraction: Fractional-Kelly multiplier in ``(0, 1]``.

    Returns:
        :class:`KellyResult` with probability fields expressed in %.

    Example: betting ``-110`` against sharp ``-105`` gives implied 52.4 %
    vs 51.2 %, an edge of ≈ −1.1 points, and therefore a zero stake.
    """
    betting_decimal = american_to_decimal(betting_odds)
    sharp_decimal = american_to_decimal(sharp_odds)

    betting_prob = decimal_to_implied_probability(betting_decimal)
    sharp_prob = decimal_to_implied_probability(sharp_decimal)

    edge = sharp_prob - betting_prob
    full_kelly = kelly_criterion(sharp_prob, betting_decimal)
    adjusted_kelly = full_kelly * kelly_fraction

    recommended_bet_amount = max(0.0, adjusted_kelly * bankroll)
    max_bet_amount = (max_bet_percentage / 100.0) * bankroll
    final_bet_amount = min(recommended_bet_amount, max_bet_amount)

    # Fraction → percentage conversion happens here and nowhere else.
    return KellyResult(
        betting_book_implied_prob=betting_prob * 100.0,
        sharp_book_implied_prob=sharp_prob * 100.0,
        edge=edge * 100.0,
        kelly_percentage=full_kelly * 100.0,
        recommended_bet_amount=recommended_bet_amount,
        final_bet_amount=final_bet_amount,
        expected_value=expected_value(final_bet_amount, sharp_prob, betting_decimal),
        is_positive_edge=edge > 0.0,
        max_bet_reached=(
            final_bet_amount == max_bet_amount
            and recommended_bet_amount > max_bet_amount
        ),
    )

