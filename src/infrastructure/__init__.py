"""Infrastructure adapters for the tracker database and runtime."""
