"""Net worth tracker source root."""
