"""Question and player records, list operations, text-file storage and a console menu for a quiz game."""

__version__ = "0.1.0"
__all__ = ["records", "collection", "storage", "cli"]