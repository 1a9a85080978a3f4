"""Branding use cases."""
