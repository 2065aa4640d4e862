"""Operational scripts for the collection notifier."""
