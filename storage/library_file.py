"""
Library File
============
Whole-file persistence of the catalog at a single path.

Save overwrites the file in place. There is no temp file or fsync:
a crash mid-save can leave the file truncated or missing.
"""

import os
from typing import Dict, Iterable

from loguru import logger

from catalog.book import Book
from storage.serializer import DecodeError, decode_catalog, encode_catalog


DEFAULT_LIBRARY_FILE = "library.txt"


class StorageError(Exception):
    """Library file could not be read, written or decoded."""
    pass


class LibraryFile:
    """
    Reads and writes the persisted catalog.

    Usage:
        lib = LibraryFile("library.txt")
        books = lib.load()
        lib.save(books.values())
    """

    def __init__(self, path: str = DEFAULT_LIBRARY_FILE):
        self._path = os.path.abspath(path)

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> Dict[str, Book]:
        """Read and decode the file. Raises StorageError on any failure."""
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            logger.debug(f"Reading {self._path} failed: {e!r}")
            raise StorageError(f"cannot read {self._path}: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise StorageError(f"cannot decode {self._path}: {e}") from e

        try:
            books = decode_catalog(text)
        except DecodeError as e:
            logger.debug(f"Decoding {self._path} failed: {e}")
            raise StorageError(f"cannot decode {self._path}: {e}") from e

        logger.info(f"Loaded {len(books)} book(s) from {self._path}")
        return books

    def save(self, books: Iterable[Book]) -> None:
        """Encode books and overwrite the file. Raises StorageError on failure."""
        text = encode_catalog(books)
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            logger.debug(f"Writing {self._path} failed: {e!r}")
            raise StorageError(f"cannot write {self._path}: {e.strerror or e}") from e

        logger.info(f"Saved library to {self._path} ({len(text)} bytes)")
