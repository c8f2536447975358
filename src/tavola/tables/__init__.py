"""
Tables module.

This module provides the table index built from a metadata snapshot, the
session-owned cache that holds it, and resolution of create/copy targets.
"""

from tavola.tables.cache import TableCache
from tavola.tables.index import SheetTables, TableIndex, sheet_descriptors
from tavola.tables.resolution import ResolvedTarget, resolve_target, sheet_ids

__all__ = [
    "TableCache",
    "SheetTables",
    "TableIndex",
    "sheet_descriptors",
    "ResolvedTarget",
    "resolve_target",
    "sheet_ids",
]
