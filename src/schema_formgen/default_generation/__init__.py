"""Default data generation exports."""

from .initial_data import generate_default

__all__ = ["generate_default"]
