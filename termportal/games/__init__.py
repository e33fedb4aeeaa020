# termportal/games/__init__.py

"""
Games hosted by the portal.

Each game is a pure simulation driven by the portal's view controller; it
never touches the terminal itself.
"""

from .snake import Direction, EndReason, GameEngine, GameSnapshot, Lifecycle

__all__ = ["Direction", "EndReason", "GameEngine", "GameSnapshot", "Lifecycle"]
