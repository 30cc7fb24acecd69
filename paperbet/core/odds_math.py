"""Fundamental odds mathematics — the single source of truth.

Every function here is **pure**: no I/O, no logging, no side effects.
Import from this module; never reimplement a conversion inside a calculator.

Four representations of the same price are supported:

1. **American** — ``+150`` (profit per 100 staked) / ``-110`` (stake to win 100).
2. **Decimal** — total return per unit staked, always ``> 1``.
3. **Fractional** — ``"N/D"`` profit per unit, equivalent decimal ``N/D + 1``.
4. **Implied probability** — ``1 / decimal``.

Design decisions
----------------
* There are two American-odds gates and they are deliberately distinct.
  :func:`parse_american_odds` is *permissive*: it checks the sign and that
  the digits form a positive integer no larger than
  :data:`MAX_ODDS_MAGNITUDE`, so ``"+50"`` parses to ``50``.
  :func:`is_valid_american_odds` is *strict*: sportsbooks never quote a line
  with magnitude below 100, and calculators that gate submission (parlay)
  apply it on top of the parse.
* Probabilities are 0–1 fractions, except for the two functions whose names
  say otherwise: :func:`get_implied_probability` returns a 0–100 percentage
  and :func:`implied_to_decimal` accepts one.  These are the only unit
  boundaries in this module.
* Fractional odds are a display format with a fixed 1/1000 resolution
  before GCD reduction.  They are lossy; never store them.
* Rounding is half-up (towards +∞), so ``decimal_to_american(2.125)`` is
  ``113`` rather than the ``112`` that Python's banker's rounding would give.

Run tests with::

    pytest tests/test_odds_math.py -v
"""

from __future__ import annotations

import math
import re
from typing import Final

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

#: American-odds magnitude floor.  No sportsbook quotes a line between
#: -99 and +99; anything there is a typo or a data error.
MIN_ODDS_MAGNITUDE: Final[int] = 100

#: American-odds magnitude ceiling.  Beyond it a favourite line collapses to a
#: decimal price indistinguishable from 1.0 and nothing downstream can size it.
MAX_ODDS_MAGNITUDE: Final[int] = 1_000_000

#: Decimal prices bounding the American range above.
MIN_DECIMAL_ODDS: Final[float] = 1.0 + 100.0 / MAX_ODDS_MAGNITUDE
MAX_DECIMAL_ODDS: Final[float] = 1.0 + MAX_ODDS_MAGNITUDE / 100.0

#: Fixed denominator used to approximate ``decimal - 1`` before reduction.
FRACTIONAL_DENOMINATOR: Final[int] = 1000

#: Neutral decimal value returned for an unparseable fractional string.
#: A decimal of 1.0 means "no profit" and callers treat it as unset.
UNSET_DECIMAL: Final[float] = 1.0

_AMERICAN_PATTERN: Final = re.compile(r"^([+-]?)0*(\d{1,7})$")


# ---------------------------------------------------------------------------
# Parsing and validation
# ---------------------------------------------------------------------------


def parse_american_odds(text: str | None) -> int | None:
    """Parse a user-typed American odds string.

    Surrounding whitespace is stripped.  An optional leading ``+`` or ``-``
    is accepted and the remainder must be a positive integer.  Unsigned
    values are treated as positive (underdog) lines.

    Examples::

        parse_american_odds("  +150 ")  → 150
        parse_american_odds("-110")     → -110
        parse_american_odds("200")      → 200
        parse_american_odds("0")        → None
        parse_american_odds("abc")      → None

    Returns:
        The signed integer line, or ``None`` for empty, non-numeric, zero
        or out-of-range (magnitude above :data:`MAX_ODDS_MAGNITUDE`) input.
        Never raises for malformed text.
    """
    if text is None:
        return None
    match = _AMERICAN_PATTERN.match(text.strip())
    if match is None:
        return None
    sign, digits = match.groups()
    magnitude = int(digits)
    if not 0 < magnitude <= MAX_ODDS_MAGNITUDE:
        return None
    return -magnitude if sign == "-" else magnitude


def is_valid_american_odds(american: int | float) -> bool:
    """Strict check used to gate calculator submission.

    True iff ``american`` is an integer (an integral float such as
    ``150.0`` counts) with magnitude between 100 and
    :data:`MAX_ODDS_MAGNITUDE` inclusive.
    """
    if isinstance(american, bool):
        return False
    if isinstance(american, float):
        if not american.is_integer():
            return False
    elif not isinstance(american, int):
        return False
    return MIN_ODDS_MAGNITUDE <= abs(american) <= MAX_ODDS_MAGNITUDE


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


def american_to_decimal(american: int | float) -> float:
    """Convert American odds to decimal (European) format.

    Examples::

        american_to_decimal(+150) → 2.5000   (risk 100 to win 150)
        american_to_decimal(-110) → 1.9091   (risk 110 to win 100)

    Raises:
        ValueError: If ``american`` is zero.  Zero is rejected by every
            parser upstream, so reaching this is a caller bug.
    """
    if american == 0:
        raise ValueError("American odds of 0 are not a price; parse input first.")
    if american > 0:
        return american / 100.0 + 1.0
    # Negative: risk |american| to win 100
    return 100.0 / abs(american) + 1.0


def decimal_to_american(decimal_odds: float) -> int:
    """Convert decimal odds to the nearest American integer.

    Values ≥ 2.0 become positive lines, values below 2.0 negative lines.
    Round trips through :func:`american_to_decimal` are exact only to the
    nearest integer line.

    Raises:
        ValueError: If ``decimal_odds <= 1`` (no profit is representable).
    """
    if decimal_odds <= 1.0:
        raise ValueError(f"Decimal odds {decimal_odds!r} must be > 1.0.")
    if decimal_odds >= 2.0:
        return _round_half_up((decimal_odds - 1.0) * 100.0)
    return _round_half_up(-100.0 / (decimal_odds - 1.0))


def decimal_to_implied_probability(decimal_odds: float) -> float:
    """Break-even win probability as a fraction in ``(0, 1)``."""
    return 1.0 / decimal_odds


def implied_to_decimal(implied_percent: float) -> float:
    """Decimal odds from an implied probability given as a **percentage**.

    ``implied_to_decimal(50.0)`` is ``2.0``.  The percentage input matches
    what a user types into the converter; internal code works in fractions
    and should use ``1 / p`` directly.

    Raises:
        ValueError: If ``implied_percent <= 0``.
    """
    if implied_percent <= 0:
        raise ValueError(f"Implied probability {implied_percent!r}% must be > 0.")
    return 100.0 / implied_percent


def decimal_to_fractional(decimal_odds: float) -> str:
    """Approximate decimal odds as a reduced ``"N/D"`` string.

    ``decimal - 1`` is scaled to a denominator of 1000, rounded, then both
    terms are divided by their GCD.  The result is a display value with
    1/1000 resolution, e.g. ``1.9091`` → ``"909/1000"``, ``2.5`` → ``"3/2"``.
    """
    numerator = _round_half_up((decimal_odds - 1.0) * FRACTIONAL_DENOMINATOR)
    divisor = math.gcd(numerator, FRACTIONAL_DENOMINATOR)
    return f"{numerator // divisor}/{FRACTIONAL_DENOMINATOR // divisor}"


def fractional_to_decimal(text: str | None) -> float:
    """Parse ``"N/D"`` fractional odds into decimal odds.

    Returns :data:`UNSET_DECIMAL` (``1.0``) when the string is malformed:
    not exactly one ``/``, non-numeric or non-finite terms, a negative
    numerator, or a non-positive denominator.  This is the one conversion
    that degrades silently instead of returning ``None``.
    """
    if not text:
        return UNSET_DECIMAL
    parts = text.split("/")
    if len(parts) != 2:
        return UNSET_DECIMAL
    try:
        numerator = float(parts[0])
        denominator = float(parts[1])
    except ValueError:
        return UNSET_DECIMAL
    if not (math.isfinite(numerator) and math.isfinite(denominator)):
        return UNSET_DECIMAL
    if numerator < 0 or denominator <= 0:
        return UNSET_DECIMAL
    return numerator / denominator + 1.0


def get_implied_probability(american: int | float) -> float:
    """Implied probability of an American line as a **percentage** (0–100).

    Examples::

        get_implied_probability(+150) → 40.0
        get_implied_probability(-110) → 52.38
    """
    return decimal_to_implied_probability(american_to_decimal(american)) * 100.0


# ---------------------------------------------------------------------------
# Payouts and display
# ---------------------------------------------------------------------------


def calculate_return(american: int | float, wager: float) -> float:
    """Profit (excluding the returned stake) if ``wager`` wins at ``american``."""
    return wager * (american_to_decimal(american) - 1.0)


def calculate_payout(american: int | float, wager: float) -> float:
    """Total payout (stake plus profit) if ``wager`` wins at ``american``."""
    return wager + calculate_return(american, wager)


def stake_payout(stake: float, decimal_odds: float) -> tuple[float, float]:
    """``(to_win, payout)`` for a stake at decimal odds."""
    return stake * (decimal_odds - 1.0), stake * decimal_odds


def format_american_odds(american: int) -> str:
    """Display form with an explicit ``+`` on positive lines."""
    return f"+{american}" if american > 0 else str(american)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
