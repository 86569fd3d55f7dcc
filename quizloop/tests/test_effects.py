"""
Tests for effects returned by the reducer.
"""

import asyncio

import pytest

from ..config import GameConfig
from ..engine_core.action import ActionType, answer_action, start_game_action
from ..engine_core.effects import (
    EffectServices,
    advance_after_answer,
    generate_new_game,
    sleep_ms,
)
from ..questions.generator import InsufficientPoolError, RandomQuestionGenerator
from .conftest import make_items, run_effect


class TestAdvanceAfterAnswer:
    """Tests for the pause that follows an answer."""

    def test_correct_answer_celebrates(self, quiz_reducer, initial_state, celebrations, delays):
        correct = initial_state.game_state.current_question.correct_option
        (effect,) = quiz_reducer.apply(initial_state, answer_action(correct)).effects

        actions = run_effect(effect)

        assert celebrations == ["confetti"]
        assert delays == [1500]
        assert [a.action_type for a in actions] == [ActionType.NEXT_QUESTION]

    def test_wrong_answer_no_celebration(self, quiz_reducer, initial_state, celebrations, delays):
        (effect,) = quiz_reducer.apply(initial_state, answer_action("d")).effects

        actions = run_effect(effect)

        assert celebrations == []
        assert delays == [1500]
        assert [a.action_type for a in actions] == [ActionType.NEXT_QUESTION]

    def test_celebrates_before_pause(self, services):
        calls = []

        async def delay(ms):
            calls.append("delay")

        services.delay = delay
        services.celebrate = lambda: calls.append("celebrate")

        run_effect(advance_after_answer(True, services))

        assert calls == ["celebrate", "delay"]

    def test_effect_is_deferred(self, services, celebrations, delays):
        """Building the effect does nothing until it is awaited."""
        advance_after_answer(True, services)

        assert celebrations == []
        assert delays == []

    def test_default_delay_waits(self):
        async def timed():
            loop = asyncio.get_running_loop()
            start = loop.time()
            await sleep_ms(20)
            return loop.time() - start

        assert asyncio.run(timed()) >= 0.015


class TestGenerateNewGame:
    """Tests for the question generation effect."""

    def test_yields_new_game(self, quiz_reducer, initial_state):
        (effect,) = quiz_reducer.apply(initial_state, start_game_action()).effects

        (action,) = run_effect(effect)

        assert action.action_type == ActionType.NEW_GAME
        assert [q.question_id for q in action.questions] == [
            "q1", "q2", "q3", "q4", "q5", "q6",
        ]

    def test_uses_configured_count(self, services, question_items):
        services.num_questions = 3

        (action,) = run_effect(generate_new_game(question_items, services))

        assert len(action.questions) == 3

    def test_pool_snapshot(self, services, question_items):
        """The effect draws from the pool as it was when the effect was built."""
        effect = generate_new_game(question_items, services)
        question_items.clear()

        (action,) = run_effect(effect)

        assert len(action.questions) == 6

    def test_short_pool_fails(self, services):
        effect = generate_new_game(make_items(5), services)

        with pytest.raises(InsufficientPoolError):
            run_effect(effect)


class TestEffectServices:
    """Tests for building services from config."""

    def test_from_config(self):
        config = GameConfig(num_questions=4, advance_delay_ms=10, options_per_question=3, seed=7)

        services = EffectServices.from_config(config)

        assert services.num_questions == 4
        assert services.advance_delay_ms == 10
        assert isinstance(services.generator, RandomQuestionGenerator)
        assert services.generator.options_per_question == 3

    def test_seeded_generators_agree(self):
        config = GameConfig(seed=42)
        items = make_items(10)

        first = EffectServices.from_config(config).generator.generate(6, items)
        second = EffectServices.from_config(config).generator.generate(6, items)

        assert first == second

    def test_from_config_keeps_given_services(self, generator):
        celebrate = lambda: None
        services = EffectServices.from_config(
            GameConfig(), generator=generator, celebrate=celebrate
        )

        assert services.generator is generator
        assert services.celebrate is celebrate
