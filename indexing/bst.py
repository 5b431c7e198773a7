"""
Ordered Index
=============
Unbalanced binary search tree over book records, keyed by title.

The tree is a derived view of the CatalogIndex. It only ever grows by
insert_one(); every other change to the catalog discards it and rebuilds
it from scratch with rebuild_from().

Ordering:
  - Titles compared lexicographically (plain str comparison).
  - Descend left while new title < node title, otherwise right.
    Equal titles therefore land in the right subtree.

Not implemented: delete, in-place update, rebalancing. Sorted insertion
degenerates the tree into a linked list; traversal is iterative so depth
is not bounded by the recursion limit.
"""

from typing import Iterable, Iterator, List, Optional

from catalog.book import Book


class TreeNode:
    """A tree node owning one record and up to two children."""
    __slots__ = ('book', 'left', 'right')

    def __init__(self, book: Book):
        self.book = book
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.book.title!r})"


class OrderedIndex:
    """
    Binary search tree of books ordered by title.

    Usage:
        tree = OrderedIndex()
        tree.insert_one(Book("Dune", "Herbert", 1965, "SciFi"))
        tree.rebuild_from(catalog_index.list_all())
        titles = [b.title for b in tree.walk()]
    """

    def __init__(self):
        self._root: Optional[TreeNode] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Book]:
        return self.walk()

    # ─── Mutation ───────────────────────────────────────────────────

    def insert_one(self, book: Book) -> None:
        """Attach a new leaf for book at the first empty slot on its path."""
        new_node = TreeNode(book)
        self._size += 1

        if self._root is None:
            self._root = new_node
            return

        node = self._root
        while True:
            if book.title < node.book.title:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def rebuild_from(self, records: Iterable[Book]) -> None:
        """Discard the current tree and reinsert records in iteration order."""
        self.clear()
        for book in records:
            self.insert_one(book)

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # ─── Traversal ──────────────────────────────────────────────────

    def walk(self) -> Iterator[Book]:
        """In-order traversal: ascending title, equal titles in insert order."""
        stack: List[TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.book
            node = node.right

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best
