"""Exceptions, logging and validation for the heuristics library."""
