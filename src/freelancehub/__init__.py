"""FreelanceHub marketplace client core."""

__version__ = "0.1.0"
