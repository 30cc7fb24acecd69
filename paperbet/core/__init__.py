"""Core betting mathematics for the Paper Edge calculators.

This package contains pure, stateless building blocks:

- ``odds_math``   — American / decimal / fractional / implied conversions
- ``arbitrage``   — two-way arbitrage stake split and hedge sizing
- ``kelly``       — Kelly criterion sizing with a bankroll cap
- ``parlay``      — combining parlay legs into one price
- ``units``       — "to win N units" wager sizing
- ``bet_results`` — profit/loss, win rate and ROI over settled bets
- ``config``      — calculator defaults (the only module that reads the env)

Nothing in this package imports from ``paperbet.services`` or ``paperbet.main``.
The math modules are side-effect-free and unit-testable in isolation.
"""
