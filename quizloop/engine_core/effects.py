"""
Effects - Deferred side effects returned by the reducer.

An effect is a zero-argument callable returning an awaitable that
resolves to a list of actions. The driver runs it and dispatches the
actions it yields; effects never touch state themselves.

Each effect captures only immutable values (a correctness flag, the
question-item pool) plus the service bundle it calls into.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Sequence
import asyncio
import logging
import random

from ..config import DEFAULT_ADVANCE_DELAY_MS, DEFAULT_NUM_QUESTIONS, GameConfig
from ..questions.generator import QuestionGenerator, RandomQuestionGenerator
from ..questions.models import QuestionItem
from .action import Action, new_game_action, next_question_action

logger = logging.getLogger(__name__)


Effect = Callable[[], Awaitable[list[Action]]]


async def sleep_ms(duration_ms: int) -> None:
    """Resolve after at least `duration_ms` milliseconds."""
    await asyncio.sleep(duration_ms / 1000)


def log_celebration() -> None:
    logger.info("Correct answer!")


@dataclass
class EffectServices:
    """
    External services effects call into.

    delay: async wait in milliseconds
    celebrate: fire-and-forget trigger for a correct answer
    generator: builds question lists from the pool
    """
    delay: Callable[[int], Awaitable[None]] = sleep_ms
    celebrate: Callable[[], None] = log_celebration
    generator: QuestionGenerator = field(default_factory=RandomQuestionGenerator)
    num_questions: int = DEFAULT_NUM_QUESTIONS
    advance_delay_ms: int = DEFAULT_ADVANCE_DELAY_MS

    @classmethod
    def from_config(cls, config: GameConfig, **kwargs) -> EffectServices:
        """Services sized by `config`; kwargs replace individual services."""
        if "generator" not in kwargs:
            kwargs["generator"] = RandomQuestionGenerator(
                rng=random.Random(config.seed),
                options_per_question=config.options_per_question,
            )
        return cls(
            num_questions=config.num_questions,
            advance_delay_ms=config.advance_delay_ms,
            **kwargs,
        )


def advance_after_answer(is_answer_correct: bool, services: EffectServices) -> Effect:
    """Celebrate a correct answer, pause, then move to the next question."""
    async def effect() -> list[Action]:
        if is_answer_correct:
            services.celebrate()
        await services.delay(services.advance_delay_ms)
        return [next_question_action()]

    return effect


def generate_new_game(
    question_items: Sequence[QuestionItem], services: EffectServices
) -> Effect:
    """Draw a fresh question list from the pool and start a new game with it."""
    items = tuple(question_items)

    async def effect() -> list[Action]:
        questions = services.generator.generate(services.num_questions, items)
        return [new_game_action(questions)]

    return effect
