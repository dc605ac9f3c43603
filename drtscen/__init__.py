"""Scenario models, a JSON scenario writer and an in-memory blockchain world mock."""

__version__ = "0.1.0"