"""
FastAPI application for Paper Edge
Exposes the betting calculators as a JSON API
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import datetime, timezone
import logging

from paperbet import __version__
from paperbet.core.bet_results import (
    BetRecord,
    calculate_roi,
    calculate_total_pl,
    calculate_win_rate,
)
from paperbet.core.config import CalculatorDefaults
from paperbet.core.kelly import KELLY_PRESETS
from paperbet.core.odds_math import format_american_odds
from paperbet.core.units import UNIT_PRESETS
from paperbet.services import (
    arbitrage_calculator,
    kelly_calculator,
    odds_converter,
    parlay_calculator,
    unit_calculator,
)
from paperbet.schemas import (
    ArbitrageRequest,
    ArbitrageResponse,
    BetSummaryRequest,
    BetSummaryResponse,
    DefaultsResponse,
    HedgeRequest,
    HedgeResponse,
    KellyRequest,
    KellyResponse,
    OddsConvertRequest,
    OddsConvertResponse,
    ParlayRequest,
    ParlayResponse,
    UnitRequest,
    UnitResponse,
    ValidationErrorResponse,
)

defaults = CalculatorDefaults.from_env()

# Logging setup
logging.basicConfig(
    level=defaults.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Documents the field-keyed error map raised by _reject.
REJECTED = {422: {"model": ValidationErrorResponse}}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("Starting Paper Edge v%s", __version__)
    logger.info(
        "Defaults: bankroll=%.2f max_bet=%.1f%% kelly_fraction=%.2f",
        defaults.bankroll, defaults.max_bet_percentage, defaults.kelly_fraction,
    )
    yield
    logger.info("Shutting down Paper Edge")


app = FastAPI(
    title="Paper Edge",
    description="Odds conversion, arbitrage, hedge, Kelly, parlay and unit calculators",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(defaults.cors_origins),
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def _reject(errors: dict) -> HTTPException:
    """422 carrying the calculator's field-keyed error map."""
    return HTTPException(status_code=422, detail={"errors": errors})


# ============================================================================
# PUBLIC ENDPOINTS
# ============================================================================

@app.get("/")
async def root():
    """Service banner"""
    return {
        "app": "Paper Edge",
        "version": __version__,
        "status": "operational",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


@app.get("/api/calculators/defaults", response_model=DefaultsResponse)
async def get_defaults():
    """Starting values and presets for every calculator form."""
    return DefaultsResponse(
        bankroll=defaults.bankroll,
        max_bet_percentage=defaults.max_bet_percentage,
        kelly_fraction=defaults.kelly_fraction,
        total_stake=defaults.total_stake,
        original_bet=defaults.original_bet,
        wager=defaults.wager,
        converter_stake=defaults.converter_stake,
        kelly_presets=dict(KELLY_PRESETS),
        unit_presets=list(UNIT_PRESETS),
    )


# ============================================================================
# CALCULATORS
# ============================================================================

@app.post("/api/odds/convert", response_model=OddsConvertResponse, responses=REJECTED)
async def convert_odds(request: OddsConvertRequest):
    """Fill in every odds format from the one supplied, plus payout for a stake."""
    quote = odds_converter.convert(request.value, request.source)
    if quote is None:
        raise _reject({"value": f"Please enter valid {request.source} odds"})

    stake = defaults.converter_stake if request.stake is None else request.stake
    to_win, payout = odds_converter.quote_payout(stake, quote)
    return OddsConvertResponse(
        american=quote.american,
        american_display=format_american_odds(quote.american),
        decimal=quote.decimal,
        fractional=quote.fractional,
        implied_probability=quote.implied_probability,
        to_win=to_win,
        payout=payout,
    )


@app.post("/api/calculators/arbitrage", response_model=ArbitrageResponse, responses=REJECTED)
async def arbitrage(request: ArbitrageRequest):
    """
    Split a total stake across two sides.

    A valid market with no arbitrage still returns 200 with
    ``is_arbitrage = false``; only malformed input is a 422.
    """
    inputs = arbitrage_calculator.ArbitrageModeInputs(
        total_stake=request.total_stake,
        side_a_odds=request.side_a_odds,
        side_b_odds=request.side_b_odds,
    )
    errors = arbitrage_calculator.validate_inputs(inputs)
    if errors:
        raise _reject(errors)
    return ArbitrageResponse(**asdict(arbitrage_calculator.calculate(inputs)))


@app.post("/api/calculators/hedge", response_model=HedgeResponse, responses=REJECTED)
async def hedge(request: HedgeRequest):
    """Size a hedge against an existing bet."""
    inputs = arbitrage_calculator.HedgeModeInputs(
        original_bet=request.original_bet,
        original_odds=request.original_odds,
        side_b_odds=request.hedge_odds,
    )
    errors = arbitrage_calculator.validate_inputs(inputs)
    if errors:
        # The hedge form labels side B as the hedge price.
        if "side_b_odds" in errors:
            errors["hedge_odds"] = errors.pop("side_b_odds")
        raise _reject(errors)
    return HedgeResponse(**asdict(arbitrage_calculator.calculate_hedge_outcome(inputs)))


@app.post("/api/calculators/kelly", response_model=KellyResponse, responses=REJECTED)
async def kelly(request: KellyRequest):
    """Kelly sizing at the betting book, using the sharp book as the true price."""
    inputs = kelly_calculator.KellyInputs(
        betting_book_line=request.betting_book_line,
        betting_book_odds=request.betting_book_odds,
        sharp_book_line=request.sharp_book_line,
        sharp_book_odds=request.sharp_book_odds,
        bankroll=request.bankroll,
        max_bet_percentage=(
            defaults.max_bet_percentage
            if request.max_bet_percentage is None else request.max_bet_percentage
        ),
        kelly_fraction=(
            defaults.kelly_fraction
            if request.kelly_fraction is None else request.kelly_fraction
        ),
    )
    errors = kelly_calculator.validate_inputs(inputs)
    if errors:
        raise _reject(errors)
    return KellyResponse(**asdict(kelly_calculator.calculate(inputs)))


@app.post("/api/calculators/parlay", response_model=ParlayResponse, responses=REJECTED)
async def parlay(request: ParlayRequest):
    """Combine legs into one ticket."""
    legs = [
        parlay_calculator.ParlayLeg(id=leg.id, odds=leg.odds, description=leg.description)
        for leg in request.legs
    ]
    errors = parlay_calculator.validate_inputs(legs, request.wager)
    if errors:
        raise _reject(errors)
    result = parlay_calculator.calculate(legs, request.wager)
    payload = asdict(result)
    payload["individual_probabilities"] = list(result.individual_probabilities)
    return ParlayResponse(**payload)


@app.post("/api/calculators/units", response_model=UnitResponse, responses=REJECTED)
async def units(request: UnitRequest):
    """Wager needed to win a number of units."""
    inputs = unit_calculator.UnitInputs(
        unit_size=request.unit_size,
        units_to_win=request.units_to_win,
        odds=request.odds,
    )
    errors = unit_calculator.validate_inputs(inputs)
    if errors:
        raise _reject(errors)
    return UnitResponse(**asdict(unit_calculator.calculate(inputs)))


@app.post("/api/bets/summary", response_model=BetSummaryResponse)
async def bet_summary(request: BetSummaryRequest):
    """Win rate, P&L and ROI over a list of paper bets."""
    bets = [
        BetRecord(status=b.status, wager_amount=b.wager_amount, return_amount=b.return_amount)
        for b in request.bets
    ]
    return BetSummaryResponse(
        bet_count=len(bets),
        win_rate=calculate_win_rate(bets),
        total_pl=calculate_total_pl(bets),
        roi=calculate_roi(bets),
    )


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Catch-all exception handler"""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "type": type(exc).__name__}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
