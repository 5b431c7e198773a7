"""
Catalog Index
=============
Authoritative title -> Book mapping.

Invariants:
  - At most one record per title; put() under an existing title replaces it.
  - Every stored record's own title equals its key.

Missing titles are not errors: get() and remove() return None.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from catalog.book import Book


class CatalogIndex:
    """Unique-key store of books, keyed by title."""

    def __init__(self):
        self._books: Dict[str, Book] = {}

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, title: str) -> bool:
        return title in self._books

    def put(self, book: Book) -> Optional[Book]:
        """Insert or overwrite under book.title. Returns the replaced record."""
        previous = self._books.get(book.title)
        self._books[book.title] = book
        return previous

    def remove(self, title: str) -> Optional[Book]:
        """Remove the record for title if present. Returns the removed record."""
        return self._books.pop(title, None)

    def get(self, title: str) -> Optional[Book]:
        return self._books.get(title)

    def list_all(self) -> Iterator[Book]:
        """Lazily yield every record. Order is unspecified (insertion order)."""
        for book in self._books.values():
            yield book

    def titles(self) -> List[str]:
        return list(self._books)

    def replace_all(self, books: Iterable[Book]) -> None:
        """Drop the current contents and store books, keyed by their titles."""
        self._books = {}
        for book in books:
            self._books[book.title] = book

    def clear(self) -> None:
        self._books.clear()
