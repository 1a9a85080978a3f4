"""Shared primitives (errors, content hashing) reused by feature packages."""
