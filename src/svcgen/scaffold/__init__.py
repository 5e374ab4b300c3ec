"""Default template assets for generated service files."""
