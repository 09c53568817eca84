"""Base decoder exports."""
from .decoder import MAX_BASE, MIN_BASE, decode, digit_value, encode

__all__ = ["MAX_BASE", "MIN_BASE", "decode", "digit_value", "encode"]
