"""Battle data model: stat blocks, per-battle state and the final result."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pokearena.data.records import Creature

MAX_TURNS = 100

class Side(Enum):
    A = "a"
    B = "b"

    @property
    def other(self) -> "Side":
        return Side.B if self is Side.A else Side.A

@dataclass(frozen=True)
class CreatureStats:
    health: int
    attack: int
    defense: int
    speed: int

@dataclass
class BattleState:
    """Mutable state of one simulation.

    Per-side data lives in explicit ``_a``/``_b`` slots and is reached through
    a :class:`Side` tag. HP only changes through :meth:`apply_damage`.
    """
    creature_a: Creature
    creature_b: Creature
    stats_a: CreatureStats
    stats_b: CreatureStats
    current_hp_a: int = -1
    current_hp_b: int = -1
    log: List[str] = field(default_factory=list)
    turn: int = 1

    def __post_init__(self):
        if self.current_hp_a < 0:
            self.current_hp_a = self.stats_a.health
        if self.current_hp_b < 0:
            self.current_hp_b = self.stats_b.health

    def creature(self, side: Side) -> Creature:
        return self.creature_a if side is Side.A else self.creature_b

    def stats(self, side: Side) -> CreatureStats:
        return self.stats_a if side is Side.A else self.stats_b

    def hp(self, side: Side) -> int:
        return self.current_hp_a if side is Side.A else self.current_hp_b

    def apply_damage(self, side: Side, amount: int) -> int:
        """Subtract ``amount`` from ``side``'s HP, clamped at 0. Returns the new HP."""
        new_hp = max(0, self.hp(side) - max(0, int(amount)))
        if side is Side.A:
            self.current_hp_a = new_hp
        else:
            self.current_hp_b = new_hp
        return new_hp

    def add_log(self, message: str) -> None:
        self.log.append(message)

    def next_turn(self) -> None:
        self.turn += 1

    def is_finished(self) -> bool:
        return self.current_hp_a <= 0 or self.current_hp_b <= 0

    def is_too_long(self) -> bool:
        return self.turn > MAX_TURNS

    def winning_side(self) -> Optional[Side]:
        if self.current_hp_a > 0 and self.current_hp_b <= 0:
            return Side.A
        if self.current_hp_b > 0 and self.current_hp_a <= 0:
            return Side.B
        return None

    def winner(self) -> Optional[Creature]:
        side = self.winning_side()
        return self.creature(side) if side is not None else None

    def to_result(self) -> "BattleResult":
        return BattleResult(
            creature_a=self.creature_a,
            creature_b=self.creature_b,
            stats_a=self.stats_a,
            stats_b=self.stats_b,
            final_hp_a=self.current_hp_a,
            final_hp_b=self.current_hp_b,
            winner=self.winner(),
            log=tuple(self.log),
            turns=self.turn - 1,
            winner_side=self.winning_side(),
        )

@dataclass(frozen=True)
class BattleResult:
    creature_a: Creature
    creature_b: Creature
    stats_a: CreatureStats
    stats_b: CreatureStats
    final_hp_a: int
    final_hp_b: int
    winner: Optional[Creature]
    log: Tuple[str, ...]
    turns: int
    winner_side: Optional[Side] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @property
    def loser(self) -> Optional[Creature]:
        # by side, so a creature battling a copy of itself still resolves
        if self.winner_side is None:
            return None
        return self.creature_b if self.winner_side is Side.A else self.creature_a

    def to_dict(self) -> Dict[str, Any]:
        def _side(creature: Creature, stats: CreatureStats, hp: int) -> Dict[str, Any]:
            return {
                "id": creature.id,
                "name": creature.name,
                "types": list(creature.types),
                "stats": {
                    "health": stats.health,
                    "attack": stats.attack,
                    "defense": stats.defense,
                    "speed": stats.speed,
                },
                "final_hp": hp,
            }
        return {
            "creature_a": _side(self.creature_a, self.stats_a, self.final_hp_a),
            "creature_b": _side(self.creature_b, self.stats_b, self.final_hp_b),
            "winner": self.winner.name if self.winner else None,
            "winner_side": self.winner_side.value if self.winner_side else None,
            "draw": self.is_draw,
            "turns": self.turns,
            "log": list(self.log),
        }

__all__ = ["Side","CreatureStats","BattleState","BattleResult","MAX_TURNS"]
