"""Ride-sharing driver missions: define, assign and track distance, count and time targets."""

__version__ = "0.1.0"
__all__ = ["missions", "driver", "snap"]