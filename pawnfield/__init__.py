"""
Pawnfield - Territory Control Card Game Engine

A deterministic, rules-driven engine for a two-player card game played
on a rectangular grid. The engine provides:
- Board, cell and card representation
- Move validation and influence propagation
- Turn/pass sequencing
- Row-majority scoring
- Bot policies for automa play
"""

__version__ = "0.1.0"
