"""Paper Edge: betting-math calculators for paper (hypothetical) wagers."""

__version__ = "1.0.0"
