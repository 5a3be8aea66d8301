"""Identity entities."""
