"""A 96-bit fixed-point decimal type with arithmetic, comparison, rounding and conversion."""

__version__ = "0.1.0"
__all__ = ["core", "compare", "arithmetic", "rounding", "convert"]