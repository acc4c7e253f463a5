"""HTTP adapter for the photo pool."""
