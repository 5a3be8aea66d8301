"""Social application layer: tweets, follows, reactions, timeline and search."""
