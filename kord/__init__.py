"""Kord Legal — AI legal brief investigator."""

__version__ = "0.4.0"
