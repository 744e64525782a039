"""Cyclopts command-line surface."""
