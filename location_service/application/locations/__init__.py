"""Locations application module."""
