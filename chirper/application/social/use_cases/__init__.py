"""Social use cases: tweets, follows, reactions, timeline and search."""
