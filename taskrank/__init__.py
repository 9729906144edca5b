"""taskrank: track tasks and see them ranked by urgency."""

__version__ = "0.1.0"
