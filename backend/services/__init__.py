"""Backend services for the exercise normalization service."""
