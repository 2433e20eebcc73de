"""File panel logic: listings, marks, search, file operations, bookmarks, desktop entries, completion and properties."""

__version__ = "0.1.0"