"""Bundled reference data (tire table and speed / load-factor table)."""
