"""
Pytest fixtures for Quizloop tests.
"""

import asyncio

import pytest

from ..engine_core.effects import EffectServices
from ..engine_core.reducer import Reducer
from ..engine_core.state import State, init_state
from ..questions.generator import SequentialQuestionGenerator
from ..questions.models import QuestionItem


def make_items(count: int) -> list[QuestionItem]:
    """Pool of `count` items q1..qN with distinct answers."""
    return [
        QuestionItem(item_id=f"q{i}", prompt=f"Question {i}?", answer=f"answer {i}")
        for i in range(1, count + 1)
    ]


def run_effect(effect):
    """Resolve an effect to the actions it yields."""
    return asyncio.run(effect())


@pytest.fixture
def question_items() -> list[QuestionItem]:
    """Ten pool items, q1..q10."""
    return make_items(10)


@pytest.fixture
def generator() -> SequentialQuestionGenerator:
    """Deterministic generator: pool order, correct answer is option 'a'."""
    return SequentialQuestionGenerator()


@pytest.fixture
def celebrations() -> list[str]:
    return []


@pytest.fixture
def delays() -> list[int]:
    return []


@pytest.fixture
def services(generator, celebrations, delays) -> EffectServices:
    """Services that record calls instead of waiting or animating."""
    async def record_delay(duration_ms: int):
        delays.append(duration_ms)

    return EffectServices(
        delay=record_delay,
        celebrate=lambda: celebrations.append("confetti"),
        generator=generator,
    )


@pytest.fixture
def quiz_reducer(services) -> Reducer:
    return Reducer(services=services)


@pytest.fixture
def initial_state(question_items, generator) -> State:
    """In-progress game on q1, with q2..q6 queued."""
    return init_state(question_items, generator=generator)
