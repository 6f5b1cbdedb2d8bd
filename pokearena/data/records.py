"""Provider-neutral creature records.

A ``RawCreatureRecord`` is what a provider hands back for one creature: its
identity plus the ordered stat listing exactly as the catalogue publishes it.
``record_from_payload`` turns a PokeAPI ``/pokemon/{name}`` document into one.

Payload shape (fields we read):
{
  "id": int,
  "name": str,                       # lowercase slug
  "stats": [                         # fixed order: hp, attack, defense,
     {"base_stat": int,              #   special-attack, special-defense, speed
      "effort": int,
      "stat": {"name": str, "url": str}}
  ],
  "types": [{"slot": int, "type": {"name": str, "url": str}}],
  "sprites": {"front_default": str | null, ...}
}
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from pokearena.core.errors import DataFormatError

@dataclass(frozen=True)
class Creature:
    """Identity of a combatant; never mutated during a battle."""
    id: int
    name: str
    types: Tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name.replace("-", " ").title()

@dataclass(frozen=True)
class StatEntry:
    name: str
    base_stat: Any
    effort: int = 0

@dataclass(frozen=True)
class RawCreatureRecord:
    id: int
    name: str
    stats: Tuple[StatEntry, ...]
    types: Tuple[str, ...] = ()
    sprite_url: Optional[str] = None

    def to_creature(self) -> Creature:
        return Creature(id=self.id, name=self.name, types=self.types)

@dataclass(frozen=True)
class CreaturePage:
    """One page of the catalogue listing."""
    count: int
    results: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)  # (name, url)

def record_from_payload(payload: Any) -> RawCreatureRecord:
    if not isinstance(payload, Mapping):
        raise DataFormatError(f"Creature payload must be an object, got {type(payload).__name__}")
    name = payload.get("name")
    if not isinstance(name, str) or not name:
        raise DataFormatError("Creature payload has no name")
    raw_stats = payload.get("stats")
    if not isinstance(raw_stats, list):
        raise DataFormatError(f"Creature '{name}' has no stats list")
    stats = []
    for i, entry in enumerate(raw_stats):
        if not isinstance(entry, Mapping):
            raise DataFormatError(f"Creature '{name}' stat #{i} is not an object")
        stat = entry.get("stat")
        stat_name = stat.get("name") if isinstance(stat, Mapping) else None
        if not isinstance(stat_name, str) or not stat_name:
            stat_name = f"stat-{i}"
        stats.append(StatEntry(name=stat_name, base_stat=entry.get("base_stat"), effort=entry.get("effort") or 0))
    return RawCreatureRecord(
        id=_as_id(payload.get("id")),
        name=name,
        stats=tuple(stats),
        types=_types_from_payload(name, payload.get("types")),
        sprite_url=_sprite_from_payload(payload.get("sprites")),
    )

def _as_id(raw_id: Any) -> int:
    return raw_id if isinstance(raw_id, int) and not isinstance(raw_id, bool) else 0

def _types_from_payload(name: str, raw_types: Any) -> Tuple[str, ...]:
    if not raw_types:
        return ()
    if not isinstance(raw_types, list):
        raise DataFormatError(f"Creature '{name}' has a malformed types list")
    slotted = []
    for i, entry in enumerate(raw_types):
        type_info = entry.get("type") if isinstance(entry, Mapping) else None
        type_name = type_info.get("name") if isinstance(type_info, Mapping) else None
        if not isinstance(type_name, str) or not type_name:
            raise DataFormatError(f"Creature '{name}' type #{i} is not a {{slot, type: {{name}}}} object")
        slot = entry.get("slot", i + 1)
        if isinstance(slot, bool) or not isinstance(slot, int):
            raise DataFormatError(f"Creature '{name}' type #{i} has a non-integer slot: {slot!r}")
        slotted.append((slot, type_name))
    return tuple(type_name for _, type_name in sorted(slotted, key=lambda s: s[0]))

def _sprite_from_payload(sprites: Any) -> Optional[str]:
    sprite = sprites.get("front_default") if isinstance(sprites, Mapping) else None
    return sprite if isinstance(sprite, str) else None

__all__ = ["Creature","StatEntry","RawCreatureRecord","CreaturePage","record_from_payload"]
