"""
Minefield agents module.

Provides agents that play through the Gymnasium environment:
- RandomAgent: Baseline random selection
- LogicAgent: Single-number deductions with low-risk guessing
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .logic_agent import LogicAgent, CellInfo

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "LogicAgent",
    "CellInfo",
]
