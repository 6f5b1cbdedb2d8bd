"""One-on-one battle engine.

A battle is a sequence of rounds. In every round the faster creature attacks
first and the other answers, until one of them is knocked out or the round
limit is reached. Randomness comes only from the injected generator:

- one coin toss (``rng.random() < 0.5`` -> side A) when speeds are equal,
  drawn once before the first round;
- one ``rng.uniform(0.85, 1.15)`` damage multiplier per attack.

With a seeded generator the whole battle, log included, is reproducible.
"""
from __future__ import annotations
import math
import random
from typing import Optional

from pokearena.core.logging import logger
from pokearena.data.provider import CreatureProvider
from pokearena.data.records import Creature
from .models import MAX_TURNS, BattleResult, BattleState, CreatureStats, Side
from .stats import extract_stats

DAMAGE_SCALE = 10
MULTIPLIER_MIN = 0.85
MULTIPLIER_MAX = 1.15
MIN_DAMAGE = 1

class BattleEngine:
    def __init__(self, provider: Optional[CreatureProvider] = None, rng: Optional[random.Random] = None):
        self.provider = provider
        self.rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------
    def battle(self, name_a: str, name_b: str) -> BattleResult:
        """Resolve both names, extract their stats and run the simulation.

        NotFoundError and DataFormatError propagate before any state exists.
        """
        if self.provider is None:
            raise RuntimeError("BattleEngine.battle needs a provider; use run() with explicit stats")
        record_a = self.provider.get_by_name(name_a)
        record_b = self.provider.get_by_name(name_b)
        stats_a = extract_stats(record_a)
        stats_b = extract_stats(record_b)
        return self.run(record_a.to_creature(), stats_a, record_b.to_creature(), stats_b)

    def run(self, creature_a: Creature, stats_a: CreatureStats,
            creature_b: Creature, stats_b: CreatureStats) -> BattleResult:
        state = BattleState(creature_a, creature_b, stats_a, stats_b)
        logger.debug("BattleStart", a=creature_a.name, b=creature_b.name)
        state.add_log(f"The battle begins between {creature_a.display_name} and {creature_b.display_name}!")
        first = self._initiative(state)
        second = first.other

        decided = False
        while not state.is_finished() and not state.is_too_long():
            state.add_log(f"--- Round {state.turn} ---")
            if self._act(state, first, second) or self._act(state, second, first):
                decided = True
                break
            state.next_turn()

        if not decided:
            self._conclude(state)
        result = state.to_result()
        logger.info("BattleEnd", winner=result.winner.name if result.winner else "draw", turns=result.turns)
        return result

    # ------------------------------------------------------------------
    # Mechanics
    # ------------------------------------------------------------------
    def damage_for(self, attacker: CreatureStats, defender: CreatureStats) -> int:
        base = (attacker.attack / max(1, defender.defense)) * DAMAGE_SCALE
        multiplier = self.rng.uniform(MULTIPLIER_MIN, MULTIPLIER_MAX)
        # half-up rounding; operands are never negative
        return max(MIN_DAMAGE, int(math.floor(base * multiplier + 0.5)))

    def _initiative(self, state: BattleState) -> Side:
        speed_a = state.stats_a.speed
        speed_b = state.stats_b.speed
        if speed_a != speed_b:
            first = Side.A if speed_a > speed_b else Side.B
            fast, slow = state.stats(first).speed, state.stats(first.other).speed
            state.add_log(
                f"{state.creature(first).display_name} is faster ({fast} vs {slow} speed) and attacks first!"
            )
            return first
        first = Side.A if self.rng.random() < 0.5 else Side.B
        state.add_log(
            f"{state.creature_a.display_name} and {state.creature_b.display_name} are equally fast "
            f"({speed_a} speed); a coin toss lets {state.creature(first).display_name} attack first!"
        )
        return first

    def _act(self, state: BattleState, attacker: Side, defender: Side) -> bool:
        """Resolve one attack. Returns True when it knocks the defender out."""
        if state.hp(attacker) <= 0:
            return False
        atk_name = state.creature(attacker).display_name
        def_name = state.creature(defender).display_name
        damage = self.damage_for(state.stats(attacker), state.stats(defender))
        remaining = state.apply_damage(defender, damage)
        state.add_log(f"{atk_name} attacks {def_name} and deals {damage} damage!")
        state.add_log(f"{def_name} has {remaining}/{state.stats(defender).health} HP left.")
        if remaining > 0:
            return False
        state.add_log(f"{def_name} is knocked out!")
        state.add_log(f"{atk_name} wins the battle!")
        return True

    def _conclude(self, state: BattleState) -> None:
        hp_a, hp_b = state.current_hp_a, state.current_hp_b
        if hp_a > 0 and hp_b > 0:
            state.add_log(f"The battle lasted too long ({MAX_TURNS} rounds) and is declared a draw!")
        elif hp_a <= 0 and hp_b <= 0:
            state.add_log("Neither creature can fight. The battle is a draw!")
        else:
            # one side entered with 0 HP
            loser = Side.A if hp_a <= 0 else Side.B
            state.add_log(f"{state.creature(loser).display_name} has no HP and cannot fight!")
            state.add_log(f"{state.creature(loser.other).display_name} wins the battle!")

__all__ = ["BattleEngine","DAMAGE_SCALE","MULTIPLIER_MIN","MULTIPLIER_MAX","MIN_DAMAGE"]
