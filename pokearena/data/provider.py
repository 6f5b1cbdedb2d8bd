"""Creature provider contract.

The battle engine only needs ``get_by_name``; listing and search are used by
the catalogue commands of the CLI.
"""
from __future__ import annotations
from typing import List, Protocol

from .records import CreaturePage, RawCreatureRecord

PAGE_SIZE = 20
SEARCH_POOL_SIZE = 2000

class CreatureProvider(Protocol):
    def get_by_name(self, name: str) -> RawCreatureRecord: ...

class CatalogueProvider(CreatureProvider, Protocol):
    def get_all(self, limit: int = PAGE_SIZE, offset: int = 0) -> CreaturePage: ...
    def search_by_name(self, term: str) -> List[str]: ...

def normalize_name(name: str) -> str:
    return str(name or "").strip().lower()

def filter_names(names, term: str) -> List[str]:
    """Case-insensitive substring filter preserving catalogue order."""
    needle = normalize_name(term)
    return [n for n in names if needle in n.lower()]

__all__ = ["CreatureProvider","CatalogueProvider","normalize_name","filter_names","PAGE_SIZE","SEARCH_POOL_SIZE"]
