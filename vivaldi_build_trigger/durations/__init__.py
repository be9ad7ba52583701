"""Historical workflow run duration extraction."""
