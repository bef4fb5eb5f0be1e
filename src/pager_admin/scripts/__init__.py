"""Operational scripts for the Pager Admin application."""
