"""Radio Orbit: internet radio station aggregation by country and city."""

__version__ = "0.1.0"
