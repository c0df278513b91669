"""
Bots module - Automa AI implementations.

Provides:
- BotPolicy: Interface for bot decision-making
- FillFirstPolicy, RandomPolicy, CustomPolicy: simple policies
- MaxRowScorePolicy: one-ply lookahead with HeuristicEvaluator
- create_policy: build a policy by name
"""

from __future__ import annotations

from .policy import BotPolicy, BotDecision, FillFirstPolicy, RandomPolicy, CustomPolicy
from .evaluator import HeuristicEvaluator, EvaluationWeights, StateEvaluation, MaxRowScorePolicy

POLICIES = {
    "fill-first": FillFirstPolicy,
    "max-row-score": MaxRowScorePolicy,
    "random": RandomPolicy,
}


def create_policy(name: str, seed: int | None = None) -> BotPolicy:
    """Build a policy from its registry name."""
    if name not in POLICIES:
        raise ValueError(f"Unknown policy: {name} (known: {', '.join(POLICIES)})")
    if name == "random":
        return RandomPolicy(seed=seed)
    return POLICIES[name]()


__all__ = [
    "BotPolicy",
    "BotDecision",
    "FillFirstPolicy",
    "RandomPolicy",
    "CustomPolicy",
    "HeuristicEvaluator",
    "EvaluationWeights",
    "StateEvaluation",
    "MaxRowScorePolicy",
    "POLICIES",
    "create_policy",
]
