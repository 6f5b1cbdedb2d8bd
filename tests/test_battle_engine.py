import random
import re

import pytest

from pokearena.battle.engine import BattleEngine
from pokearena.battle.models import CreatureStats, MAX_TURNS, Side
from pokearena.core.errors import DataFormatError, NotFoundError
from pokearena.data.records import Creature, RawCreatureRecord, StatEntry

ALPHA = Creature(1, "alpha")
BETA = Creature(2, "beta")
HP_LINE = re.compile(r"^(\w+) has (\d+)/(\d+) HP left\.$")


class FixedRng:
    def __init__(self, multiplier=1.0, coin=0.0):
        self.multiplier = multiplier
        self.coin = coin
        self.coin_tosses = 0
    def random(self):
        self.coin_tosses += 1
        return self.coin
    def uniform(self, a, b): return self.multiplier


class FakeProvider:
    def __init__(self, records):
        self.records = {r.name: r for r in records}
        self.calls = []
    def get_by_name(self, name):
        self.calls.append(name)
        if name not in self.records:
            raise NotFoundError(name)
        return self.records[name]


def make_record(cid, name, hp, atk, dfn, spd, count=6):
    values = [hp, atk, dfn, 10, 10, spd][:count]
    return RawCreatureRecord(id=cid, name=name, stats=tuple(StatEntry(f"s{i}", v) for i, v in enumerate(values)))


def first_attackers(log):
    """Name of the creature acting first in every round."""
    out = []
    for i, line in enumerate(log):
        if line.startswith("--- Round"):
            out.append(log[i + 1].split(" attacks ")[0])
    return out


def test_scripted_battle_log():
    engine = BattleEngine(rng=FixedRng(1.0))
    result = engine.run(ALPHA, CreatureStats(30, 20, 10, 20), BETA, CreatureStats(25, 10, 10, 10))
    assert list(result.log) == [
        "The battle begins between Alpha and Beta!",
        "Alpha is faster (20 vs 10 speed) and attacks first!",
        "--- Round 1 ---",
        "Alpha attacks Beta and deals 20 damage!",
        "Beta has 5/25 HP left.",
        "Beta attacks Alpha and deals 10 damage!",
        "Alpha has 20/30 HP left.",
        "--- Round 2 ---",
        "Alpha attacks Beta and deals 20 damage!",
        "Beta has 0/25 HP left.",
        "Beta is knocked out!",
        "Alpha wins the battle!",
    ]
    assert result.winner == ALPHA
    assert (result.final_hp_a, result.final_hp_b) == (20, 0)
    # KO in round 2 ends the loop before the round counter moves on
    assert result.turns == 1


def test_knockout_by_first_attacker_skips_second_attacker():
    engine = BattleEngine(rng=FixedRng(1.0))
    result = engine.run(ALPHA, CreatureStats(10, 100, 10, 5), BETA, CreatureStats(10, 100, 10, 50))
    assert result.winner == BETA
    assert result.final_hp_b == 10
    assert not any(line.startswith("Alpha attacks") for line in result.log)


def test_faster_side_b_acts_first_without_coin_toss():
    rng = FixedRng(1.0)
    result = BattleEngine(rng=rng).run(ALPHA, CreatureStats(50, 10, 10, 1), BETA, CreatureStats(50, 10, 10, 2))
    assert result.log[1] == "Beta is faster (2 vs 1 speed) and attacks first!"
    assert set(first_attackers(result.log)) == {"Beta"}
    assert rng.coin_tosses == 0


@pytest.mark.parametrize("coin,expected", [(0.2, "Alpha"), (0.7, "Beta")])
def test_speed_tie_is_decided_by_one_coin_toss(coin, expected):
    rng = FixedRng(1.0, coin=coin)
    result = BattleEngine(rng=rng).run(ALPHA, CreatureStats(60, 10, 10, 40), BETA, CreatureStats(60, 10, 10, 40))
    assert result.log[1] == (
        f"Alpha and Beta are equally fast (40 speed); a coin toss lets {expected} attack first!"
    )
    assert set(first_attackers(result.log)) == {expected}
    assert rng.coin_tosses == 1


def test_round_limit_forces_a_draw():
    result = BattleEngine(rng=random.Random(3)).run(
        ALPHA, CreatureStats(1000, 0, 50, 10), BETA, CreatureStats(1000, 0, 50, 20)
    )
    assert result.is_draw
    assert result.winner is None
    assert result.turns == MAX_TURNS
    assert (result.final_hp_a, result.final_hp_b) == (1000 - MAX_TURNS, 1000 - MAX_TURNS)
    assert sum(1 for line in result.log if line.startswith("--- Round")) == MAX_TURNS
    assert result.log[-1] == "The battle lasted too long (100 rounds) and is declared a draw!"


def test_seeded_battles_are_reproducible():
    a = CreatureStats(80, 45, 40, 55)
    b = CreatureStats(75, 50, 35, 55)
    first = BattleEngine(rng=random.Random(2024)).run(ALPHA, a, BETA, b)
    second = BattleEngine(rng=random.Random(2024)).run(ALPHA, a, BETA, b)
    assert first == second
    assert "\n".join(first.log) == "\n".join(second.log)


def test_fast_hard_hitter_wins_across_seeds():
    a = CreatureStats(health=50, attack=50, defense=50, speed=100)
    b = CreatureStats(health=50, attack=10, defense=100, speed=10)
    for seed in range(50):
        result = BattleEngine(rng=random.Random(seed)).run(ALPHA, a, BETA, b)
        assert result.winner == ALPHA
        assert result.turns < 20
        assert set(first_attackers(result.log)) == {"Alpha"}


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_identical_stats_follow_the_seeded_coin_toss(seed):
    same = CreatureStats(health=45, attack=49, defense=49, speed=45)
    expected = "Alpha" if random.Random(seed).random() < 0.5 else "Beta"
    result = BattleEngine(rng=random.Random(seed)).run(ALPHA, same, BETA, same)
    assert result.log[1].endswith(f"a coin toss lets {expected} attack first!")
    assert set(first_attackers(result.log)) == {expected}
    last_seen = {"Alpha": 45, "Beta": 45}
    for line in result.log:
        m = HP_LINE.match(line)
        if m:
            name, hp = m.group(1), int(m.group(2))
            assert hp < last_seen[name]
            last_seen[name] = hp


def test_outcome_invariants_for_random_stat_pairs():
    gen = random.Random(99)
    for i in range(200):
        a = CreatureStats(gen.randint(1, 300), gen.randint(0, 200), gen.randint(0, 200), gen.randint(0, 150))
        b = CreatureStats(gen.randint(1, 300), gen.randint(0, 200), gen.randint(0, 200), gen.randint(0, 150))
        result = BattleEngine(rng=random.Random(i)).run(ALPHA, a, BETA, b)
        assert 0 <= result.final_hp_a <= a.health
        assert 0 <= result.final_hp_b <= b.health
        assert result.turns <= MAX_TURNS
        if result.winner == ALPHA:
            assert result.final_hp_a > 0 and result.final_hp_b == 0
        elif result.winner == BETA:
            assert result.final_hp_b > 0 and result.final_hp_a == 0
        else:
            assert result.final_hp_a > 0 and result.final_hp_b > 0
            assert "declared a draw" in result.log[-1]


def test_zero_health_creature_loses_without_a_round():
    result = BattleEngine(rng=FixedRng()).run(ALPHA, CreatureStats(0, 10, 10, 99), BETA, CreatureStats(20, 10, 10, 1))
    assert result.winner == BETA
    assert result.turns == 0
    assert result.log[-2:] == ("Alpha has no HP and cannot fight!", "Beta wins the battle!")


def test_battle_resolves_names_through_provider():
    provider = FakeProvider([make_record(25, "pikachu", 35, 55, 40, 90), make_record(1, "bulbasaur", 45, 49, 49, 45)])
    result = BattleEngine(provider, random.Random(5)).battle("pikachu", "bulbasaur")
    assert provider.calls == ["pikachu", "bulbasaur"]
    assert result.creature_a.name == "pikachu"
    assert result.stats_a == CreatureStats(35, 55, 40, 90)
    assert result.stats_b == CreatureStats(45, 49, 49, 45)
    assert result.log[0] == "The battle begins between Pikachu and Bulbasaur!"
    assert result.log[1] == "Pikachu is faster (90 vs 45 speed) and attacks first!"


def test_unknown_name_propagates_not_found():
    provider = FakeProvider([make_record(25, "pikachu", 35, 55, 40, 90)])
    with pytest.raises(NotFoundError) as exc:
        BattleEngine(provider, FixedRng()).battle("pikachu", "missingno")
    assert exc.value.name == "missingno"


def test_malformed_stats_abort_before_simulation():
    rng = FixedRng()
    provider = FakeProvider([make_record(25, "pikachu", 35, 55, 40, 90), make_record(2, "glitch", 1, 1, 1, 1, count=5)])
    with pytest.raises(DataFormatError):
        BattleEngine(provider, rng).battle("pikachu", "glitch")
    assert rng.coin_tosses == 0


def test_battle_without_provider_is_rejected():
    with pytest.raises(RuntimeError):
        BattleEngine().battle("a", "b")


def test_same_creature_object_on_both_sides_reports_the_losing_side():
    stats = CreatureStats(30, 20, 10, 10)
    result = BattleEngine(rng=FixedRng(coin=0.9)).run(ALPHA, stats, ALPHA, stats)
    assert result.winner_side is Side.B
    assert result.final_hp_a == 0 and result.final_hp_b > 0
    assert result.loser is ALPHA
