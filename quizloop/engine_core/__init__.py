"""
Engine Core - Quiz state, actions, effects and the reducer.

The engine is the closed loop that:
1. Holds the quiz State
2. Receives Actions
3. Applies them via the reducer
4. Returns Effects whose resolved actions feed back into the reducer
"""

from .state import (
    GameTag,
    GameBeforeStart,
    GameInProgress,
    GameEnded,
    GameState,
    State,
    init_state,
)
from .action import (
    Action,
    ActionType,
    answer_action,
    next_question_action,
    start_game_action,
    new_game_action,
)
from .effects import Effect, EffectServices, advance_after_answer, generate_new_game
from .reducer import Reducer, ReducerResult, reducer

__all__ = [
    "GameTag",
    "GameBeforeStart",
    "GameInProgress",
    "GameEnded",
    "GameState",
    "State",
    "init_state",
    "Action",
    "ActionType",
    "answer_action",
    "next_question_action",
    "start_game_action",
    "new_game_action",
    "Effect",
    "EffectServices",
    "advance_after_answer",
    "generate_new_game",
    "Reducer",
    "ReducerResult",
    "reducer",
]
