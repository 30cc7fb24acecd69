"""Profit/loss statistics over settled paper bets.

``return_amount`` on a bet is the *profit* credited when it wins (the stake
is not included), matching :func:`~paperbet.core.odds_math.calculate_return`.
Pushes and pending bets never move P&L.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Literal, Optional

BetStatus = Literal["pending", "won", "lost", "push"]

#: Statuses that count as a decided bet for win-rate purposes.
COMPLETED_STATUSES: Final[frozenset[str]] = frozenset({"won", "lost", "push"})


@dataclass(frozen=True)
class BetRecord:
    status: BetStatus
    wager_amount: float
    return_amount: Optional[float] = None


def calculate_win_rate(bets: Iterable[BetRecord]) -> float:
    """Share of completed bets that won, as a percentage (pushes count as completed)."""
    completed = [b for b in bets if b.status in COMPLETED_STATUSES]
    if not completed:
        return 0.0
    wins = sum(1 for b in completed if b.status == "won")
    return wins / len(completed) * 100.0


def calculate_total_pl(bets: Iterable[BetRecord]) -> float:
    """Net profit: winnings of won bets minus stakes of lost bets."""
    total = 0.0
    for bet in bets:
        if bet.status == "won" and bet.return_amount:
            total += bet.return_amount
        elif bet.status == "lost":
            total -= bet.wager_amount
    return total


def calculate_roi(bets: Iterable[BetRecord]) -> float:
    """Return on investment, in %, over the stakes of won and lost bets."""
    bets = list(bets)
    total_wagered = sum(b.wager_amount for b in bets if b.status in ("won", "lost"))
    if total_wagered == 0:
        return 0.0
    return calculate_total_pl(bets) / total_wagered * 100.0
