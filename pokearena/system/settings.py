from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional
from pokearena.core.logging import logger

SETTINGS_FILENAME = ".pokearena_settings.json"
DEFAULT_API_BASE_URL = "https://pokeapi.co/api/v2"
LOG_LEVELS = {"DEBUG","INFO","WARN","ERROR"}

@dataclass
class SettingsData:
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = 10.0  # seconds per HTTP request
    retries: int = 3               # attempts on connection errors / timeouts
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    debug: bool = False            # Verbose provider/battle logging
    data_dir: Optional[str] = None # Directory of PokeAPI JSON dumps; None -> live API

    def normalize(self):
        if not isinstance(self.api_base_url, str) or not self.api_base_url.strip():
            self.api_base_url = DEFAULT_API_BASE_URL
        self.api_base_url = self.api_base_url.strip().rstrip("/")
        try:
            self.request_timeout = float(self.request_timeout)
        except (TypeError, ValueError):
            self.request_timeout = 10.0
        if not self.request_timeout > 0 or self.request_timeout == float("inf"):
            self.request_timeout = 10.0
        if isinstance(self.retries, bool) or not isinstance(self.retries, int) or self.retries < 1:
            self.retries = 3
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            self.log_level = "INFO"
        self.log_level = self.log_level.upper()
        self.debug = self.debug is True
        if not isinstance(self.data_dir, str) or not self.data_dir:
            self.data_dir = None

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("settings file must hold a JSON object")
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))
