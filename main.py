#!/usr/bin/env python3
"""
PokeArena

Thin entry point around the command line front end in pokearena.cli:
- catalogue browsing (list / search / show) over PokeAPI or local dumps
- one-on-one battle simulation with a readable combat log

To run: python main.py battle pikachu bulbasaur --seed 7
"""

from pokearena.cli import main

if __name__ == "__main__":
    main()
