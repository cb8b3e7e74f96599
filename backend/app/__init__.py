"""Files API — minimal CRUD service for file metadata."""

__version__ = "0.1.0"
