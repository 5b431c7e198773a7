"""
Book Record
===========
The single record type stored by the catalog.

Field order is fixed: title, author, publication_year, genre.
The on-disk field names (Title, Author, PublicationYear, Genre) are kept
compatible with existing library files.
"""

from dataclasses import dataclass
from typing import Any, Dict


# External field name for each attribute, in serialization order.
FIELD_NAMES = (
    ("title", "Title"),
    ("author", "Author"),
    ("publication_year", "PublicationYear"),
    ("genre", "Genre"),
)


@dataclass(frozen=True)
class Book:
    """
    One book. The title is its identity in the catalog.

    No validation: empty strings and non-positive years are accepted as-is.
    """
    title: str
    author: str = ""
    publication_year: int = 0
    genre: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """External representation with on-disk field names."""
        return {external: getattr(self, attr) for attr, external in FIELD_NAMES}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Book':
        return cls(**{attr: data[external] for attr, external in FIELD_NAMES})

