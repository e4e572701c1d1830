"""Domain layer: entities, identifiers and business errors."""
