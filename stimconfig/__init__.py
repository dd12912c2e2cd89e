"""Stim Config - 12-channel stimulation configuration editor."""

__version__ = "0.1.0"
