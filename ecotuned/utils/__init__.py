"""Shared helpers: clock, rounding and logging setup."""
