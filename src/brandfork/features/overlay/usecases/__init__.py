"""Overlay use cases."""
