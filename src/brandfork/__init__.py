"""brandfork - project an overlay and a brand onto a vendored engine tree."""

__version__ = "0.1.0"
