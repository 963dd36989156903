"""Page chrome shared across the app."""
