"""Client for the sentiment comment service."""
