"""EcoTuned: weather- and grid-aware energy-saving tips for UK households."""

__version__ = "0.1.0"
