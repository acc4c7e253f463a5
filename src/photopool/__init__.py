"""photopool - filesystem-backed photo pool with a paginated HTTP API."""

__version__ = "0.1.0"
