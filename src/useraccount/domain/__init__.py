"""Domain layer: value objects, entities and ports."""
