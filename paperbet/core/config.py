"""Calculator defaults — every tunable starting value in one place.

:class:`CalculatorDefaults` is a frozen dataclass carrying the values the
calculators pre-fill (bankroll, Kelly risk dial, stakes) plus the few
settings the HTTP layer needs.  Nowhere else in the codebase should these
numbers be hard-coded.

Values come from the environment (a ``.env`` file is honoured via
``python-dotenv``); anything unset falls back to the field default.

Typical usage::

    from paperbet.core.config import CalculatorDefaults

    cfg = CalculatorDefaults.from_env()

    # Override a single value for a test:
    from dataclasses import replace
    custom_cfg = replace(cfg, bankroll=5000.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from dotenv import load_dotenv


@dataclass(frozen=True)
class CalculatorDefaults:
    """Immutable bundle of calculator starting values.

    Attributes:
        bankroll: Kelly calculator bankroll.  Env ``DEFAULT_BANKROLL``.
        max_bet_percentage: Kelly bankroll cap in %.  Env ``DEFAULT_MAX_BET_PCT``.
        kelly_fraction: Fractional-Kelly dial.  Env ``DEFAULT_KELLY_FRACTION``.
        total_stake: Arbitrage total stake.  Env ``DEFAULT_TOTAL_STAKE``.
        original_bet: Hedge original bet.  Env ``DEFAULT_ORIGINAL_BET``.
        wager: Parlay wager.  Env ``DEFAULT_WAGER``.
        converter_stake: Odds-converter stake.  Env ``DEFAULT_CONVERTER_STAKE``.
        cors_origins: Allowed browser origins for the API.  Env
            ``CORS_ORIGINS`` (comma separated).
        log_level: Root logging level name.  Env ``LOG_LEVEL``.
    """

    bankroll: float = 1000.0
    max_bet_percentage: float = 5.0
    kelly_fraction: float = 0.25
    total_stake: float = 1000.0
    original_bet: float = 100.0
    wager: float = 100.0
    converter_stake: float = 10.0
    cors_origins: tuple[str, ...] = field(default=("*",))
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.bankroll <= 0:
            raise ValueError(f"bankroll must be > 0, got {self.bankroll!r}")
        if not (0 < self.max_bet_percentage <= 100):
            raise ValueError(
                f"max_bet_percentage must be in (0, 100], got {self.max_bet_percentage!r}"
            )
        if not (0 < self.kelly_fraction <= 1):
            raise ValueError(
                f"kelly_fraction must be in (0, 1], got {self.kelly_fraction!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CalculatorDefaults":
        """Build defaults from ``environ`` (``os.environ`` after ``load_dotenv``)."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        base = cls()

        def _float(name: str, fallback: float) -> float:
            raw = environ.get(name)
            return float(raw) if raw not in (None, "") else fallback

        origins = environ.get("CORS_ORIGINS", "")
        return cls(
            bankroll=_float("DEFAULT_BANKROLL", base.bankroll),
            max_bet_percentage=_float("DEFAULT_MAX_BET_PCT", base.max_bet_percentage),
            kelly_fraction=_float("DEFAULT_KELLY_FRACTION", base.kelly_fraction),
            total_stake=_float("DEFAULT_TOTAL_STAKE", base.total_stake),
            original_bet=_float("DEFAULT_ORIGINAL_BET", base.original_bet),
            wager=_float("DEFAULT_WAGER", base.wager),
            converter_stake=_float("DEFAULT_CONVERTER_STAKE", base.converter_stake),
            cors_origins=(
                tuple(o.strip() for o in origins.split(",") if o.strip())
                or base.cors_origins
            ),
            log_level=environ.get("LOG_LEVEL", base.log_level).upper(),
        )
