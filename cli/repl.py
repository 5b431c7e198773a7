"""
Library Menu REPL
=================
Numbered text menu over a library Session.

Features:
  - Options 1-6: add, update, delete, get, list, save and exit
  - Invalid or out-of-range input redisplays the menu
  - Publication year falls back to 0 when it is not an integer
  - EOF at any prompt exits without saving
"""

import re
import sys
from typing import Optional, TextIO

from loguru import logger

from catalog.book import Book
from cli.renderer import Renderer
from cli.session import Session
from storage.library_file import StorageError


# ─── Menu Text ──────────────────────────────────────────────────────

MENU = """
Select an option:
1. Add a book
2. Update a book
3. Delete a book
4. Get details of a book
5. List all books
6. Save to file and exit"""

OPTION_PROMPT = "Enter option number: "

OPT_ADD = 1
OPT_UPDATE = 2
OPT_DELETE = 3
OPT_GET = 4
OPT_LIST = 5
OPT_SAVE_EXIT = 6

# Optional sign followed by ASCII digits, nothing else.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Accepted range: signed 64-bit.
INT_MIN = -2**63
INT_MAX = 2**63 - 1


def parse_int(text: str) -> Optional[int]:
    """
    Parse a trimmed decimal integer. Returns None if text is not one or
    falls outside the signed 64-bit range.
    """
    text = text.strip()
    if not _INT_PATTERN.fullmatch(text):
        return None
    try:
        value = int(text)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


# ─── REPL ───────────────────────────────────────────────────────────

class REPL:
    """
    Interactive library menu.

    Usage:
        repl = REPL(Session("library.txt"))
        repl.run()
    """

    def __init__(self, session: Session, input_stream: TextIO = None,
                 output: TextIO = None):
        self.session = session
        self.input = input_stream or sys.stdin
        self.renderer = Renderer(output)
        self._running = False

    def run(self):
        """Load the library, then loop over the menu until exit or EOF."""
        self._load()
        self._running = True

        while self._running:
            self.renderer.render_message(MENU)
            try:
                line = self._read_line(OPTION_PROMPT)
                option = parse_int(line)
                if option is None:
                    self.renderer.render_message("Invalid input. Try again.")
                    continue
                self._dispatch(option)
            except EOFError:
                self.renderer.render_message("\nInput closed; exiting without saving.")
                self._running = False

    # ─── Dispatch ───────────────────────────────────────────────────

    def _dispatch(self, option: int):
        if option == OPT_ADD:
            self._cmd_add()
        elif option == OPT_UPDATE:
            self._cmd_update()
        elif option == OPT_DELETE:
            self._cmd_delete()
        elif option == OPT_GET:
            self._cmd_get()
        elif option == OPT_LIST:
            self._cmd_list()
        elif option == OPT_SAVE_EXIT:
            self._cmd_save_exit()
        else:
            self.renderer.render_message("Invalid option. Try again.")

    def _cmd_add(self):
        book = self._read_book()
        self.session.add_book(book)
        self.renderer.render_message("Book added.")

    def _cmd_update(self):
        title = self._read_line("Enter the title of the book to update: ").strip()
        book = self._read_book()
        self.session.update_book(title, book)
        self.renderer.render_message("Book updated.")

    def _cmd_delete(self):
        title = self._read_line("Enter the title of the book to delete: ").strip()
        if self.session.delete_book(title):
            self.renderer.render_message("Book deleted.")
        else:
            self.renderer.render_message("Book not found.")

    def _cmd_get(self):
        title = self._read_line("Enter the title of the book: ").strip()
        book = self.session.get_book(title)
        if book is None:
            self.renderer.render_message("Book not found.")
        else:
            self.renderer.render_book(book)

    def _cmd_list(self):
        self.renderer.render_books(self.session.list_books())

    def _cmd_save_exit(self):
        try:
            self.session.save()
        except StorageError as e:
            self.renderer.render_error("saving library", e)
        self._running = False

    # ─── Helpers ────────────────────────────────────────────────────

    def _load(self):
        try:
            self.session.load()
        except StorageError as e:
            self.renderer.render_error("loading library", e)

    def _read_book(self) -> Book:
        title = self._read_line("Enter title: ").strip()
        author = self._read_line("Enter author: ").strip()
        year_text = self._read_line("Enter publication year: ")
        year = parse_int(year_text)
        if year is None:
            logger.debug(f"Publication year {year_text.strip()!r} is not an integer, using 0")
            year = 0
        genre = self._read_line("Enter genre: ").strip()
        return Book(title, author, year, genre)

    def _read_line(self, prompt: str) -> str:
        """Prompt and read one line. Raises EOFError when input is exhausted."""
        self.renderer.render_prompt(prompt)
        line = self.input.readline()
        if not line:
            raise EOFError
        return line
