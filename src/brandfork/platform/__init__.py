"""Platform adapters: logging, filesystem and image helpers."""
