"""
Library Renderer
================
Operator-facing output for the menu: book details, listings, messages
and errors. All console text goes through here.
"""

import sys
from typing import Iterable, TextIO

from catalog.book import Book


class Renderer:
    """Writes menu output to a text stream (stdout by default)."""

    def __init__(self, output: TextIO = None):
        self.output = output or sys.stdout

    # ─── Public API ─────────────────────────────────────────────────

    def render_book(self, book: Book):
        """Render one record's details, preceded by a blank line."""
        self._print(f"\nTitle: {book.title}")
        self._print(f"Author: {book.author}")
        self._print(f"Publication Year: {book.publication_year}")
        self._print(f"Genre: {book.genre}")

    def render_books(self, books: Iterable[Book]) -> int:
        """
        Render every record followed by a blank line.
        Returns the number rendered; prints a notice when there are none.
        """
        count = 0
        for book in books:
            self.render_book(book)
            self._print("")
            count += 1
        if count == 0:
            self._print("No books in the library.")
        return count

    def render_message(self, message: str):
        if message:
            self._print(message)

    def render_prompt(self, prompt: str):
        """Write a prompt without a trailing newline."""
        self.output.write(prompt)
        self.output.flush()

    def render_error(self, action: str, error: Exception):
        """Render a failure as 'Error while <action>: <error>'."""
        self._print(f"Error while {action}: {error}")

    # ─── Output ─────────────────────────────────────────────────────

    def _print(self, text: str):
        print(text, file=self.output)
