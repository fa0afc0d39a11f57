"""
Recommendation engine: turns a day's weather features, the household profile
and the live grid mix into a short, ranked list of energy-saving tips.

Modules
-------
rules        : Rule catalog + evaluate_rules() — one module per theme.
calculations : Thermostat suggestions and best-solar-window selection.
ranker       : sort_recommendations() + apply_category_diversity()
               + select_recommendations().
time_status  : apply_time_status() — marks elapsed actions for today.
engine       : generate_recommendations() — the entry point.
"""
