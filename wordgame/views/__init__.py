"""
Views Package

Contains the display contract the game session drives and its in-memory board.
"""

from .board import Display, BoardDisplay

__all__ = ['Display', 'BoardDisplay']
