"""stagegate — pre-commit license header, formatting and lint gate."""

__version__ = "0.1.0"
