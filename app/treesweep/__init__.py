"""treesweep - Sweep build output and editor debris from project trees."""

__version__ = "0.1.0"
