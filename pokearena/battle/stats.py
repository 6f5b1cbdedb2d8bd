"""Stat extraction from raw creature records.

The catalogue lists six stats in a fixed order (hp, attack, defense,
special-attack, special-defense, speed). Battles use four of them.
"""
from __future__ import annotations
from typing import Any

from pokearena.core.errors import DataFormatError
from pokearena.data.records import RawCreatureRecord
from .models import CreatureStats

HEALTH_INDEX = 0
ATTACK_INDEX = 1
DEFENSE_INDEX = 2
SPEED_INDEX = 5
REQUIRED_ENTRIES = SPEED_INDEX + 1

def _as_stat(record: RawCreatureRecord, index: int) -> int:
    entry = record.stats[index]
    value: Any = entry.base_stat
    if isinstance(value, bool):
        value = None
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdecimal():
        value = int(value.strip())
    if not isinstance(value, int) or value < 0:
        raise DataFormatError(
            f"{record.name}: stat #{index} ({entry.name}) is not a non-negative integer: {entry.base_stat!r}"
        )
    return value

def extract_stats(record: RawCreatureRecord) -> CreatureStats:
    if len(record.stats) < REQUIRED_ENTRIES:
        raise DataFormatError(
            f"{record.name}: expected at least {REQUIRED_ENTRIES} stat entries, got {len(record.stats)}"
        )
    return CreatureStats(
        health=_as_stat(record, HEALTH_INDEX),
        attack=_as_stat(record, ATTACK_INDEX),
        defense=_as_stat(record, DEFENSE_INDEX),
        speed=_as_stat(record, SPEED_INDEX),
    )

__all__ = ["extract_stats"]
