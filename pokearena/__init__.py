"""
pokearena - browse a creature catalogue and simulate one-on-one battles.

Subpackages:
- core (errors, logging, type display metadata)
- system (settings)
- data (creature providers: PokeAPI over HTTP, local JSON dumps)
- battle (stat extraction, battle engine, rendering)
"""
__version__ = "0.1.0"
