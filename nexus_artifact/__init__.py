"""Resolve, download and track versioned Nexus artifacts."""

__version__ = "1.4.0"
