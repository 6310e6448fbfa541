"""ABOUTME: Team type-matchup aggregation engine.
ABOUTME: Computes offensive coverage and defensive weakness vectors for a roster."""

__version__ = "0.1.0"
