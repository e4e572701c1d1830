"""Shared infrastructure: dependency injection, error handling, health checks."""
