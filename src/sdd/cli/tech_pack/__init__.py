"""Tech pack resolution, validation and routing commands."""
