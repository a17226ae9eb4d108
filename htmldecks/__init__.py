"""Compile deck descriptions into standalone, navigable HTML slide decks."""

__version__ = "0.1.0"
