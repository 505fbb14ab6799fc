"""
Controllers Package

Contains the HTTP blueprints.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
