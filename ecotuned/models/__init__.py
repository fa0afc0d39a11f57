"""Domain models: weather, preferences, grid mix and recommendations."""
