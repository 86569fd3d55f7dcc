"""
Quizloop - Quiz Game Control Core

A small, deterministic state machine for an interactive quiz game.
The core provides:
- Game state and action vocabulary
- A total reducer: (state, action) -> (next state, effects)
- Deferred effects (delays, celebration, new question sets)
- An asyncio driver that feeds effect results back into the reducer
"""

__version__ = "0.1.0"
