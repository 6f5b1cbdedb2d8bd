"""HTTP provider backed by PokeAPI (https://pokeapi.co).

Endpoints used:
  GET {base}/pokemon?limit=&offset=   -> {"count": int, "results": [{"name", "url"}]}
  GET {base}/pokemon/{name_or_id}     -> full creature document (see records.py)

Connection errors and timeouts are retried; HTTP errors are not. A 404 maps to
NotFoundError, anything else to ProviderError.
"""
from __future__ import annotations
import time
from typing import Any, Dict, List, Optional

import requests
from requests.utils import quote

from pokearena.core.errors import NotFoundError, ProviderError
from pokearena.core.logging import logger
from pokearena.system.settings import DEFAULT_API_BASE_URL, SettingsData
from .provider import PAGE_SIZE, SEARCH_POOL_SIZE, filter_names, normalize_name
from .records import CreaturePage, RawCreatureRecord, record_from_payload

class PokeApiProvider:
    def __init__(self, base_url: str = DEFAULT_API_BASE_URL, *, timeout: float = 10.0, retries: int = 3,
                 retry_delay: float = 1.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = max(1, retries)
        self.retry_delay = retry_delay
        self.session = session or requests.Session()
        self._cache: Dict[str, RawCreatureRecord] = {}

    @classmethod
    def from_settings(cls, data: SettingsData) -> "PokeApiProvider":
        return cls(data.api_base_url, timeout=data.request_timeout, retries=data.retries)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get_by_name(self, name: str) -> RawCreatureRecord:
        key = normalize_name(name)
        if not key:
            raise NotFoundError(str(name))
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        record = record_from_payload(self._get_json(f"/pokemon/{quote(key, safe='')}", missing=name))
        self._cache[key] = record
        self._cache.setdefault(record.name, record)
        return record

    def get_by_id(self, creature_id: int) -> RawCreatureRecord:
        record = record_from_payload(self._get_json(f"/pokemon/{int(creature_id)}", missing=str(creature_id)))
        self._cache.setdefault(record.name, record)
        return record

    def get_all(self, limit: int = PAGE_SIZE, offset: int = 0) -> CreaturePage:
        data = self._get_json("/pokemon", params={"limit": limit, "offset": offset})
        results = tuple((r["name"], r.get("url", "")) for r in data.get("results", []) if r.get("name"))
        return CreaturePage(count=int(data.get("count", len(results))), results=results)

    def search_by_name(self, term: str) -> List[str]:
        page = self.get_all(SEARCH_POOL_SIZE, 0)
        return filter_names((name for name, _ in page.results), term)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    def _get_json(self, path: str, *, params: Optional[dict] = None, missing: Optional[str] = None) -> Any:
        url = f"{self.base_url}{path}"
        for attempt in range(1, self.retries + 1):
            logger.debug("ProviderRequest", url=url, attempt=attempt)
            try:
                response = self.session.get(url, params=params, timeout=self.timeout)
            except (requests.ConnectionError, requests.Timeout) as e:
                if attempt < self.retries:
                    logger.warn("ProviderRetry", url=url, attempt=attempt, error=str(e))
                    time.sleep(self.retry_delay)
                    continue
                raise ProviderError(url, f"gave up after {self.retries} attempts: {e}") from e
            if response.status_code == 404 and missing is not None:
                raise NotFoundError(missing)
            try:
                response.raise_for_status()
            except requests.HTTPError as e:
                raise ProviderError(url, str(e)) from e
            try:
                return response.json()
            except ValueError as e:
                raise ProviderError(url, f"invalid JSON body: {e}") from e
        raise ProviderError(url, "no attempts made")

__all__ = ["PokeApiProvider"]
