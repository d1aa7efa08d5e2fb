"""Command line interface for pondcalc."""
