"""Locations infrastructure: SQL adapter, HTTP routers and schemas."""
