"""Unit sizing: how much to wager to win a target number of units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

#: Quick-pick unit sizes offered by the calculator.
UNIT_PRESETS: Final[tuple[int, ...]] = (1, 5, 10, 25, 50, 100)


@dataclass(frozen=True)
class UnitResult:
    wager: float
    target_win: float
    total_winnings: float
    units_to_win: float


def wager_to_win(target_win: float, american: int) -> float:
    """Stake required at ``american`` odds to profit ``target_win``.

    Favourites risk ``|odds|`` per 100 won; underdogs win ``odds`` per 100
    risked.

    Raises:
        ValueError: If ``american`` is zero.
    """
    if american == 0:
        raise ValueError("American odds of 0 are not a price; parse input first.")
    if american < 0:
        return target_win * abs(american) / 100.0
    return target_win * 100.0 / american


def calculate_units(unit_size: float, units_to_win: float, american: int) -> UnitResult:
    """Wager needed to win ``units_to_win`` units of ``unit_size`` each."""
    target_win = unit_size * units_to_win
    wager = wager_to_win(target_win, american)
    return UnitResult(
        wager=wager,
        target_win=target_win,
        total_winnings=wager + target_win,
        units_to_win=units_to_win,
    )
