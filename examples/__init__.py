"""Example problems solved with the heuristics library."""
