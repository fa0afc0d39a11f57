"""
Weather feature extraction: raw hourly forecast samples → one ``WeatherSnapshot``
per calendar day.

Modules
-------
drying     : drying_score() + find_continuous_drying_periods().
conditions : summarize_conditions() — severity-based day summary.
snapshot   : extract_weather_snapshot() — the entry point.
"""
