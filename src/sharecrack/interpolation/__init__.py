"""Interpolator exports."""
from .lagrange import constant_term, interpolate

__all__ = ["constant_term", "interpolate"]
