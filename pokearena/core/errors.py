"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class PokeArenaError(Exception):
    pass

class NotFoundError(PokeArenaError):
    def __init__(self, name: str):
        super().__init__(f"No creature named '{name}'")
        self.name = name

class DataFormatError(PokeArenaError):
    pass

class DataLoadError(PokeArenaError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail

class ProviderError(PokeArenaError):
    def __init__(self, url: str, detail: str):
        super().__init__(f"Request to {url} failed: {detail}")
        self.url = url
        self.detail = detail

class MatchupError(PokeArenaError):
    pass
