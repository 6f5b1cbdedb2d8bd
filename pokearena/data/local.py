"""Offline provider reading saved PokeAPI ``/pokemon/{name}`` documents.

Every ``*.json`` file in the directory is one creature payload; files are
indexed by their ``name`` field, so file names do not matter. Listing order
is by creature id, then name.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List

from pokearena.core.errors import DataLoadError, NotFoundError
from pokearena.core.logging import logger
from .provider import PAGE_SIZE, filter_names, normalize_name
from .records import CreaturePage, RawCreatureRecord, record_from_payload

class LocalDumpProvider:
    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self._index: Dict[str, Path] | None = None
        self._cache: Dict[str, RawCreatureRecord] = {}

    def _load(self, path: Path) -> Any:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise DataLoadError(str(path), str(e)) from e

    def _build_index(self) -> Dict[str, Path]:
        if self._index is not None:
            return self._index
        if not self.directory.is_dir():
            raise DataLoadError(str(self.directory), "not a directory")
        entries: list[tuple[int, str, Path]] = []
        for p in self.directory.glob("*.json"):
            data = self._load(p)
            if not isinstance(data, dict) or not isinstance(data.get("name"), str):
                logger.warn("DumpSkipped", path=str(p), reason="no name field")
                continue
            cid = data.get("id") if isinstance(data.get("id"), int) else 0
            entries.append((cid, data["name"].lower(), p))
        entries.sort(key=lambda e: (e[0], e[1]))
        self._index = {name: p for _, name, p in entries}
        logger.debug("DumpIndexBuilt", directory=str(self.directory), count=len(self._index))
        return self._index

    def get_by_name(self, name: str) -> RawCreatureRecord:
        key = normalize_name(name)
        if key in self._cache:
            return self._cache[key]
        path = self._build_index().get(key) if key else None
        if path is None:
            raise NotFoundError(str(name))
        record = record_from_payload(self._load(path))
        self._cache[key] = record
        return record

    def get_all(self, limit: int = PAGE_SIZE, offset: int = 0) -> CreaturePage:
        index = self._build_index()
        names = list(index)[offset:offset + limit]
        return CreaturePage(count=len(index), results=tuple((n, index[n].as_uri()) for n in names))

    def search_by_name(self, term: str) -> List[str]:
        return filter_names(self._build_index(), term)

__all__ = ["LocalDumpProvider"]
