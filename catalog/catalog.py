"""
Library Catalog
===============
Owns the CatalogIndex (source of truth) and the OrderedIndex (derived BST)
and keeps them mirrored.

Synchronization policy:
  - add() of a new title        -> incremental insert_one() into the tree
  - add() overwriting a title   -> full rebuild (the stale node would remain)
  - update() / delete()         -> full rebuild
  - load_records()              -> replace contents, then one full rebuild

The tree is never patched in place. A rebuild creates a new generation of
nodes from the index's current iteration order.
"""

from collections import Counter
from typing import Iterable, Iterator, Optional

from loguru import logger

from catalog.book import Book
from catalog.catalog_index import CatalogIndex
from indexing.bst import OrderedIndex


class Catalog:
    """
    Book catalog with a title index and an ordered tree view.

    Usage:
        catalog = Catalog()
        catalog.add(Book("Dune", "Herbert", 1965, "SciFi"))
        catalog.get("Dune")
        catalog.delete("Dune")
    """

    def __init__(self):
        self._index = CatalogIndex()
        self._tree = OrderedIndex()

    @property
    def index(self) -> CatalogIndex:
        return self._index

    @property
    def tree(self) -> OrderedIndex:
        return self._tree

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, title: str) -> bool:
        return title in self._index

    # ─── Mutations ──────────────────────────────────────────────────

    def add(self, book: Book) -> None:
        """Insert or overwrite the record under book.title."""
        replaced = self._index.put(book)
        if replaced is None:
            self._tree.insert_one(book)
        else:
            logger.debug(f"add() replaced '{book.title}', rebuilding tree")
            self.rebuild()

    def update(self, title: str, book: Book) -> None:
        """
        Replace the record stored under title with book.

        The replacement is re-keyed to book.title: the entry under title is
        removed first, so a changed title never leaves the old key behind.
        An absent title is not an error; book is simply stored.
        """
        self._index.remove(title)
        self._index.put(book)
        self.rebuild()

    def delete(self, title: str) -> bool:
        """Remove the record for title. Returns False if there was none."""
        removed = self._index.remove(title)
        self.rebuild()
        return removed is not None

    def load_records(self, books: Iterable[Book]) -> None:
        """Replace the whole catalog with books, then rebuild the tree once."""
        self._index.replace_all(books)
        self.rebuild()

    def rebuild(self) -> None:
        """Discard the tree and reconstruct it from the index."""
        self._tree.rebuild_from(self._index.list_all())
        logger.opt(lazy=True).debug(
            "Ordered index rebuilt: {} node(s), height {}",
            lambda: len(self._tree), self._tree.height)

    # ─── Reads ──────────────────────────────────────────────────────

    def get(self, title: str) -> Optional[Book]:
        return self._index.get(title)

    def list_all(self) -> Iterator[Book]:
        return self._index.list_all()

    def list_ordered(self) -> Iterator[Book]:
        """Records in ascending title order, read from the tree."""
        return self._tree.walk()

    def is_consistent(self) -> bool:
        """True when the tree holds exactly the index's records."""
        return Counter(self._tree.walk()) == Counter(self._index.list_all())
