"""Generation, loading and version checking of a fishing mod's settings file."""

__version__ = "0.1.0"
__all__ = ["sections", "species", "catalog", "config"]