"""Property PDF importer."""

__version__ = "0.1.0"
