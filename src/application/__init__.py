"""Application layer: ports, use cases and results."""
