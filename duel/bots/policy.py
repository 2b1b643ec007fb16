"""
Bot Policy - Interface for bot decision-making.

A BotPolicy picks one of the legal actions for its seat and returns a
decision. Bots go through the same action path as humans, so they can
never make a move a human could not.
"""

from __future__ import annotations
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..engine_core.action import Action
from ..engine_core.action_generator import buy_actions


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    Contains the action to take and an explanation for logs.
    """
    action: Action
    explanation: str = ""
    evaluated_actions: int = 0


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    A policy defines how a bot selects actions.
    """

    @abstractmethod
    def select_action(self, legal_actions: list[Action]) -> BotDecision:
        """
        Select an action from the legal actions.

        Args:
            legal_actions: List of legal actions to choose from

        Returns:
            BotDecision with the selected action
        """

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__


class RandomPolicy(BotPolicy):
    """
    Random policy - buys a random affordable card, else discards one.

    Used for:
    - Simulations
    - Full-match tests
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self.rng = rng or random.Random(seed)

    def select_action(self, legal_actions: list[Action]) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        candidates = buy_actions(legal_actions) or legal_actions
        action = self.rng.choice(candidates)
        return BotDecision(
            action=action,
            explanation="Selected randomly",
            evaluated_actions=len(candidates),
        )


class FirstLegalPolicy(BotPolicy):
    """
    First-legal policy - always selects the first legal action.

    Used for deterministic testing.
    """

    def select_action(self, legal_actions: list[Action]) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        return BotDecision(
            action=legal_actions[0],
            explanation="Selected first legal action",
            evaluated_actions=1,
        )
