"""
Action System - The vocabulary of events that change quiz state.

Actions come from two places:
1. The player (answer, start_game)
2. Resolved effects (next_question after the pause, new_game with fresh questions)

Constructors only build data. Whether an action applies is decided
by the reducer.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..questions.models import Answer, Question


class ActionType(Enum):
    """Types of actions in the system."""
    ANSWER = "answer"
    NEXT_QUESTION = "next_question"
    START_GAME = "start_game"
    NEW_GAME = "new_game"


@dataclass(frozen=True)
class Action:
    """
    A single event dispatched to the reducer.

    `answer` is set for ANSWER, `questions` for NEW_GAME.
    """
    action_type: ActionType
    answer: Answer | None = None
    questions: tuple[Question, ...] = ()

    @property
    def tag(self) -> str:
        return self.action_type.value


def answer_action(answer: Answer) -> Action:
    """The player picked an option."""
    return Action(action_type=ActionType.ANSWER, answer=answer)


def next_question_action() -> Action:
    """Advance past the answered question."""
    return Action(action_type=ActionType.NEXT_QUESTION)


def start_game_action() -> Action:
    """Ask for a fresh game drawn from the pool."""
    return Action(action_type=ActionType.START_GAME)


def new_game_action(questions: Sequence[Question]) -> Action:
    """Begin a game with these questions, in order."""
    return Action(action_type=ActionType.NEW_GAME, questions=tuple(questions))
