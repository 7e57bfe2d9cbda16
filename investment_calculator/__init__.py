"""Compound-growth projections for recurring-contribution investment plans."""

__version__ = "0.1.0"
