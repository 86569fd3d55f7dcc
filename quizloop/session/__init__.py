"""
Session Module - Runs one quiz application session.

A session holds the question-item pool and the current game. The
driver applies actions one at a time and feeds effect results back
into the reducer. Nothing is persisted.
"""

from .driver import GameDriver, StateListener

__all__ = [
    "GameDriver",
    "StateListener",
]
