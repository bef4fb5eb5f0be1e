"""Pager Admin API: administration backend for a paging and dispatch system."""
