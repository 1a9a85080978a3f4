"""Feature packages: overlay materialization and brand asset generation."""
