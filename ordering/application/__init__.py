"""Application layer - use cases over the Order aggregate."""
