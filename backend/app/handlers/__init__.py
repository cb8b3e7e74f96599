"""Resource handlers — one store statement per operation."""
