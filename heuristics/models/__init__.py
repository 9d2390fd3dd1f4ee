"""Solution-facing types."""
