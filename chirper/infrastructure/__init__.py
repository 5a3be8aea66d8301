"""Infrastructure layer: storage adapters, hashing and dependency wiring."""
