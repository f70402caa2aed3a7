"""
Controllers Package

Contains the interactive session driver.
"""

from .game_controller import GameController, SessionOptions

__all__ = ['GameController', 'SessionOptions']
