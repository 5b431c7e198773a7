"""
Library Storage
===============
Public API for the persistence layer.

Usage:
    from storage import LibraryFile, StorageError
    from storage import encode_catalog, decode_catalog
"""

from storage.serializer import DecodeError, encode_catalog, decode_catalog
from storage.library_file import DEFAULT_LIBRARY_FILE, LibraryFile, StorageError

__all__ = [
    "DecodeError", "encode_catalog", "decode_catalog",
    "DEFAULT_LIBRARY_FILE", "LibraryFile", "StorageError",
]
