"""License disclosure generator for vendored Go and npm dependencies."""

__version__ = "0.1.0"
