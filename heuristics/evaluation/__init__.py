"""Run-history metrics."""
