"""
Pydantic request/response schemas for the Paper Edge API.

Numeric form fields are accepted as numbers *or* raw text so the API sees
exactly what a form would send; the calculator services own validation and
report problems as a field-keyed error map rather than pydantic errors.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

# Numbers may arrive as JSON numbers or as the text a user typed.
FormNumber = Optional[Union[float, str]]


# ---------------------------------------------------------------------------
# Arbitrage / hedge
# ---------------------------------------------------------------------------

class ArbitrageRequest(BaseModel):
    """Payload for POST /api/calculators/arbitrage."""

    total_stake: FormNumber = Field(None, description="Amount to split across both sides")
    side_a_odds: str = Field("", description='American odds, e.g. "+150"')
    side_b_odds: str = Field("", description='American odds, e.g. "-130"')

    model_config = {
        "json_schema_extra": {
            "example": {"total_stake": 1000, "side_a_odds": "+150", "side_b_odds": "-130"}
        }
    }


class HedgeRequest(BaseModel):
    """Payload for POST /api/calculators/hedge."""

    original_bet: FormNumber = Field(None, description="Stake already placed")
    original_odds: str = Field("", description="American odds of the original bet")
    hedge_odds: str = Field("", description="American odds available on the other side")


class HedgeResultSchema(BaseModel):
    hedge_stake: float
    guaranteed_win: float
    max_possible_win: float


class ArbitrageResponse(BaseModel):
    side_a_stake: float
    side_b_stake: float
    side_a_return: float
    side_b_return: float
    guaranteed_profit: float
    profit_margin: float = Field(..., description="Percent of total stake")
    is_arbitrage: bool
    hedge_result: Optional[HedgeResultSchema] = None


class HedgeResponse(BaseModel):
    original_bet: float
    hedge_stake: float
    original_return: float
    hedge_return: float
    guaranteed_win: float
    max_possible_win: float
    profit_margin: float
    is_profitable: bool


# ---------------------------------------------------------------------------
# Kelly
# ---------------------------------------------------------------------------

class KellyRequest(BaseModel):
    """Payload for POST /api/calculators/kelly.  Unset risk controls use server defaults."""

    betting_book_line: str = ""
    betting_book_odds: str = ""
    sharp_book_line: str = ""
    sharp_book_odds: str = ""
    bankroll: FormNumber = None
    max_bet_percentage: FormNumber = None
    kelly_fraction: FormNumber = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "betting_book_line": "-3.5",
                "betting_book_odds": "+105",
                "sharp_book_line": "-3.5",
                "sharp_book_odds": "-110",
                "bankroll": 1000,
                "max_bet_percentage": 5,
                "kelly_fraction": 0.25,
            }
        }
    }


class KellyResponse(BaseModel):
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
# Parlay
# ---------------------------------------------------------------------------

class ParlayLegSchema(BaseModel):
    id: str
    odds: str = ""
    description: str = Field("", max_length=200)


class ParlayRequest(BaseModel):
    """Payload for POST /api/calculators/parlay."""

    legs: List[ParlayLegSchema] = Field(default_factory=list)
    wager: FormNumber = None


class ParlayResponse(BaseModel):
    combined_decimal_odds: float
    combined_american_odds: int
    total_payout: float
    profit: float
    overall_probability: float
    individual_probabilities: List[float]


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

class UnitRequest(BaseModel):
    """Payload for POST /api/calculators/units."""

    unit_size: FormNumber = None
    units_to_win: FormNumber = None
    odds: str = ""


class UnitResponse(BaseModel):
    wager: float
    target_win: float
    total_winnings: float
    units_to_win: float


# ---------------------------------------------------------------------------
# Odds converter
# ---------------------------------------------------------------------------

class OddsConvertRequest(BaseModel):
    """Payload for POST /api/odds/convert."""

    value: Union[str, int, float]
    source: Literal["american", "decimal", "fractional", "implied"]
    stake: FormNumber = None


class OddsConvertResponse(BaseModel):
    american: int
    american_display: str
    decimal: float
    fractional: str
    implied_probability: float
    to_win: float
    payout: float


# ---------------------------------------------------------------------------
# Bet results
# ---------------------------------------------------------------------------

class BetRecordSchema(BaseModel):
    status: Literal["pending", "won", "lost", "push"]
    wager_amount: float = Field(..., ge=0)
    return_amount: Optional[float] = None


class BetSummaryRequest(BaseModel):
    """Payload for POST /api/bets/summary."""

    bets: List[BetRecordSchema] = Field(default_factory=list)


class BetSummaryResponse(BaseModel):
    bet_count: int
    win_rate: float
    total_pl: float
    roi: float


# ---------------------------------------------------------------------------
# Errors / defaults
# ---------------------------------------------------------------------------

class ValidationErrorDetail(BaseModel):
    errors: Dict[str, str]


class ValidationErrorResponse(BaseModel):
    """Body of a 422 from any calculator endpoint."""

    detail: ValidationErrorDetail


class DefaultsResponse(BaseModel):
    bankroll: float
    max_bet_percentage: float
    kelly_fraction: float
    total_stake: float
    original_bet: float
    wager: float
    converter_stake: float
    kelly_presets: Dict[str, float]
    unit_presets: List[int]
