"""Plan preparation and the projection pipeline."""
