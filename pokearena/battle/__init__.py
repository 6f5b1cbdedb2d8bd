"""
Battle system package.
- models.py (CreatureStats, Side, BattleState, BattleResult)
- stats.py (stat extraction from raw creature records)
- engine.py (initiative, damage and turn resolution)
- render.py (HP bars, creature panels, combat log)
"""
from .models import BattleResult, BattleState, CreatureStats, Side, MAX_TURNS
from .stats import extract_stats
from .engine import BattleEngine

__all__ = ["BattleEngine","BattleResult","BattleState","CreatureStats","Side","MAX_TURNS","extract_stats"]
