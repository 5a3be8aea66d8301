"""Identity application layer: registration, login and profiles."""
