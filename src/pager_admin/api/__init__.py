"""HTTP API for the Pager Admin application."""
