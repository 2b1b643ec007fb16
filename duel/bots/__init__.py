"""
Bots module - Automated players.

Provides:
- BotPolicy: Interface for bot decision-making
- RandomPolicy: Buys at random, discards when nothing is affordable
- FirstLegalPolicy: Deterministic baseline
- play_match: Runs a whole match between two policies
"""

from .policy import BotPolicy, BotDecision, RandomPolicy, FirstLegalPolicy
from .match import MatchResult, play_match

__all__ = [
    "BotPolicy",
    "BotDecision",
    "RandomPolicy",
    "FirstLegalPolicy",
    "MatchResult",
    "play_match",
]
