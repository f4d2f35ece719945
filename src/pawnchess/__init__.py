"""Pawns-only chess: rules engine and console front end."""

__version__ = "0.1.0"
