"""Application layer: session, cache, list state, queries and commands."""
