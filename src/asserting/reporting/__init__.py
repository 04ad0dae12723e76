"""Rendering assertions for terminals and CI tools."""
