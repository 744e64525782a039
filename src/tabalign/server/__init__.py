"""Stdio server surface for editor integrations."""
