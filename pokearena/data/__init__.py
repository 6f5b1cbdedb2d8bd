"""
Creature data providers.

- records.py (Creature, StatEntry, RawCreatureRecord, payload parsing)
- provider.py (provider protocol + shared helpers)
- pokeapi.py (live PokeAPI over HTTP)
- local.py (directory of saved PokeAPI payloads)
"""
from .records import Creature, CreaturePage, RawCreatureRecord, StatEntry, record_from_payload
from .provider import CatalogueProvider, CreatureProvider
from .pokeapi import PokeApiProvider
from .local import LocalDumpProvider

__all__ = [
    "Creature","CreaturePage","RawCreatureRecord","StatEntry","record_from_payload",
    "CatalogueProvider","CreatureProvider","PokeApiProvider","LocalDumpProvider",
]
