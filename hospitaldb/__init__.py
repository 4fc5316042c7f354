"""Hospital records in an SQLite database: schema, table models, entry forms and a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]