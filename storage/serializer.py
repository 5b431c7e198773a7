"""
Library Serializer
==================
JSON encoding of the whole catalog as a single object.

File layout (compact, UTF-8):
  {"<title>": {"Title": str, "Author": str, "PublicationYear": int, "Genre": str}, ...}

Keys are titles. Decoding accepts exactly this shape and nothing else.
"""

import json
from typing import Any, Dict, Iterable

from loguru import logger

from catalog.book import Book, FIELD_NAMES


class DecodeError(ValueError):
    """Persisted data is not valid JSON or not a title -> book object."""
    pass


_FIELD_TYPES = {
    "Title": str,
    "Author": str,
    "PublicationYear": int,
    "Genre": str,
}


def encode_catalog(books: Iterable[Book]) -> str:
    """Encode books as a compact JSON object keyed by title."""
    data = {book.title: book.to_dict() for book in books}
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def decode_catalog(text: str) -> Dict[str, Book]:
    """
    Decode a persisted catalog into title -> Book.

    Raises DecodeError on malformed JSON or any deviation from the layout.
    A record whose key differs from its Title is keyed by its Title; two
    records ending up with the same title fail the decode.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # ValueError also covers integer literals past the conversion limit
        raise DecodeError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")

    books: Dict[str, Book] = {}
    for key, value in data.items():
        book = _decode_record(key, value)
        if book.title != key:
            logger.warning(f"Record stored under '{key}' has title "
                           f"'{book.title}'; keying it by its title")
        if book.title in books:
            raise DecodeError(f"record '{key}': title '{book.title}' "
                              f"already used by another record")
        books[book.title] = book
    return books


def _decode_record(key: str, value: Any) -> Book:
    if not isinstance(value, dict):
        raise DecodeError(f"record '{key}': expected an object, "
                          f"got {type(value).__name__}")

    expected = [external for _, external in FIELD_NAMES]
    missing = [name for name in expected if name not in value]
    if missing:
        raise DecodeError(f"record '{key}': missing field(s) {missing}")
    unknown = sorted(set(value) - set(expected))
    if unknown:
        raise DecodeError(f"record '{key}': unknown field(s) {unknown}")

    for name, expected_type in _FIELD_TYPES.items():
        field = value[name]
        # bool is an int subclass; a year of true/false is still malformed
        if isinstance(field, bool) or not isinstance(field, expected_type):
            raise DecodeError(f"record '{key}': field {name} must be "
                              f"{expected_type.__name__}, got {type(field).__name__}")

    return Book.from_dict(value)
