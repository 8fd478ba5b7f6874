"""Sports data providers."""
