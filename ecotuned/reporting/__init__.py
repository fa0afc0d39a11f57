"""
ecotuned.reporting — terminal formatting for CLI output.

Modules:
  formatters — ASCII formatters for recommendations and drying windows.
"""
