"""
Library Indexing Module
=======================
In-memory ordered index over book records.

Components:
  - bst: unbalanced binary search tree keyed by title, rebuilt from the
    CatalogIndex on every non-insert mutation
"""
