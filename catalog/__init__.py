# Library Catalog Package
# =======================
# Book records, the title index and the Catalog that keeps the ordered
# index in sync with it.

from catalog.book import Book
from catalog.catalog_index import CatalogIndex
from catalog.catalog import Catalog
