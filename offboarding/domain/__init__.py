"""Domain layer: entities and typed errors."""
