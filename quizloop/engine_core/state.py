"""
Game State - The quiz state model.

Design principles:
- Immutable: every variant is a frozen dataclass, sequences are tuples
- Closed union: GameState is exactly one of three variants, told apart by `tag`
- All mutation goes through the reducer

Variants:
- GameBeforeStart: a game not yet begun (not produced by any transition)
- GameInProgress: one question on screen, answered ones behind, a queue ahead
- GameEnded: terminal, holds only the answered questions
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Sequence, Union

from ..config import DEFAULT_NUM_QUESTIONS
from ..questions.generator import QuestionGenerator, RandomQuestionGenerator
from ..questions.models import Answer, AnsweredQuestion, Question, QuestionItem


class GameTag(Enum):
    """Discriminator for the GameState union."""
    BEFORE_START = "before_start"
    IN_PROGRESS = "in_progress"
    ENDED = "ended"


@dataclass(frozen=True)
class GameBeforeStart:
    """A game that has not started yet."""
    tag: ClassVar[GameTag] = GameTag.BEFORE_START


@dataclass(frozen=True)
class GameInProgress:
    """
    A game being played.

    `answered_questions` is most-recent first.
    `current_answer` is None until the current question is answered.
    """
    tag: ClassVar[GameTag] = GameTag.IN_PROGRESS

    current_question: Question
    answered_questions: tuple[AnsweredQuestion, ...] = ()
    current_answer: Answer | None = None
    next_questions: tuple[Question, ...] = ()

    @property
    def is_answered(self) -> bool:
        return self.current_answer is not None

    @property
    def total_questions(self) -> int:
        """Answered + current + queued. Fixed for the whole game."""
        return len(self.answered_questions) + 1 + len(self.next_questions)

    @classmethod
    def start(cls, questions: Sequence[Question]) -> GameInProgress:
        """First question on screen, the rest queued. `questions` must be non-empty."""
        first, *rest = questions
        return cls(current_question=first, next_questions=tuple(rest))

    def with_answer(self, answer: Answer) -> GameInProgress:
        return replace(self, current_answer=answer)


@dataclass(frozen=True)
class GameEnded:
    """A finished game. `answered_questions` is most-recent first."""
    tag: ClassVar[GameTag] = GameTag.ENDED

    answered_questions: tuple[AnsweredQuestion, ...] = ()

    @property
    def correct_count(self) -> int:
        return sum(1 for aq in self.answered_questions if aq.is_correct)


GameState = Union[GameBeforeStart, GameInProgress, GameEnded]


@dataclass(frozen=True)
class State:
    """
    Complete application state.

    The question-item pool lives for the whole application run;
    the game state is replaced each time a new game starts.
    """
    question_items: tuple[QuestionItem, ...]
    game_state: GameState = field(default_factory=GameBeforeStart)

    def with_game_state(self, game_state: GameState) -> State:
        return replace(self, game_state=game_state)


def init_state(
    question_items: Sequence[QuestionItem],
    num_questions: int = DEFAULT_NUM_QUESTIONS,
    generator: QuestionGenerator | None = None,
) -> State:
    """
    Build the initial state: a game already in progress.

    Raises InsufficientPoolError when the pool has fewer than
    `num_questions` items.
    """
    generator = generator or RandomQuestionGenerator()
    questions = generator.generate(num_questions, question_items)
    return State(
        question_items=tuple(question_items),
        game_state=GameInProgress.start(questions),
    )
