"""
Library Session
===============
Application context that wires the catalog to its library file.

Owns:
  - Catalog (CatalogIndex + OrderedIndex)
  - LibraryFile (whole-file JSON persistence)

Lifecycle:
  - load() once at start; a failure leaves the catalog empty
  - mutations through the catalog
  - save() once at explicit exit
"""

from typing import Iterator, Optional

from loguru import logger

from catalog.book import Book
from catalog.catalog import Catalog
from storage.library_file import DEFAULT_LIBRARY_FILE, LibraryFile


class Session:
    """
    One operator's session over a library file.

    Usage:
        session = Session("library.txt")
        session.load()
        session.catalog.add(book)
        session.save()
    """

    def __init__(self, library_path: str = DEFAULT_LIBRARY_FILE):
        self.library = LibraryFile(library_path)
        self.catalog = Catalog()

        # ── Statistics ──
        self.stats = {
            "added": 0,
            "updated": 0,
            "deleted": 0,
        }

    @property
    def library_path(self) -> str:
        return self.library.path

    # ─── Persistence ────────────────────────────────────────────────

    def load(self) -> int:
        """
        Load the library file into the catalog. Returns the record count.

        Raises StorageError; the catalog is left untouched (empty at start).
        """
        books = self.library.load()
        self.catalog.load_records(books.values())
        return len(self.catalog)

    def save(self) -> None:
        """Write the whole catalog to the library file. Raises StorageError."""
        self.library.save(self.catalog.list_all())
        logger.debug(f"Session stats: {self.stats}")

    # ─── Catalog Operations ─────────────────────────────────────────

    def add_book(self, book: Book) -> None:
        self.catalog.add(book)
        self.stats["added"] += 1

    def update_book(self, title: str, book: Book) -> None:
        self.catalog.update(title, book)
        self.stats["updated"] += 1

    def delete_book(self, title: str) -> bool:
        removed = self.catalog.delete(title)
        if removed:
            self.stats["deleted"] += 1
        return removed

    def get_book(self, title: str) -> Optional[Book]:
        return self.catalog.get(title)

    def list_books(self) -> Iterator[Book]:
        return self.catalog.list_all()
