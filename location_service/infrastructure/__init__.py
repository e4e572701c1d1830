"""Infrastructure layer: adapters for storage, transport and authentication."""
