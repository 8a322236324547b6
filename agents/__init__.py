"""
Player implementations.
Contains scripted, random and console-driven players that produce bets for a pot.
"""

from .console_agent import ConsoleAgent
from .random_agent import RandomAgent
from .scripted_agent import ScriptedAgent

__all__ = ["ConsoleAgent", "RandomAgent", "ScriptedAgent"]
