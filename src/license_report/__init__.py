"""Dependency license report rendering."""
