"""
Integration tests - The driver running the full action/effect loop.
"""

import asyncio
import logging

from ..config import GameConfig
from ..engine_core.action import answer_action, next_question_action, start_game_action
from ..engine_core.effects import EffectServices
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameEnded, GameInProgress, GameTag, State
from ..session import GameDriver
from .conftest import make_items


def make_driver(initial_state, services):
    return GameDriver(initial_state, Reducer(services=services))


class TestGameDriver:
    """Tests for GameDriver."""

    def test_full_game(self, initial_state, services, celebrations):
        """Answering every question through the driver ends the game."""
        driver = make_driver(initial_state, services)

        async def play():
            while isinstance(driver.state.game_state, GameInProgress):
                question = driver.state.game_state.current_question
                driver.dispatch(answer_action(question.correct_option))
                await driver.wait_idle()

        asyncio.run(play())

        game = driver.state.game_state
        assert isinstance(game, GameEnded)
        assert len(game.answered_questions) == 6
        assert len(celebrations) == 6
        assert driver.pending_effects == 0

    def test_double_answer_single_advance(self, initial_state, services):
        """Two quick answers to one question advance only once."""
        driver = make_driver(initial_state, services)

        async def play():
            driver.dispatch(answer_action("a"))
            driver.dispatch(answer_action("b"))
            assert driver.pending_effects == 1
            await driver.wait_idle()

        asyncio.run(play())

        game = driver.state.game_state
        assert game.current_question.question_id == "q2"
        assert [aq.answer for aq in game.answered_questions] == ["a"]

    def test_start_game_after_end(self, initial_state, services):
        driver = make_driver(initial_state, services)

        async def play():
            while isinstance(driver.state.game_state, GameInProgress):
                driver.dispatch(answer_action("b"))
                await driver.wait_idle()
            driver.dispatch(start_game_action())
            await driver.wait_idle()

        asyncio.run(play())

        game = driver.state.game_state
        assert game.tag == GameTag.IN_PROGRESS
        assert game.answered_questions == ()
        assert game.total_questions == 6

    def test_listeners_see_changes_only(self, initial_state, services):
        driver = make_driver(initial_state, services)
        seen = []
        unsubscribe = driver.subscribe(lambda state, action: seen.append(action.tag))

        async def play():
            driver.dispatch(next_question_action())
            driver.dispatch(answer_action("a"))
            await driver.wait_idle()
            unsubscribe()
            driver.dispatch(answer_action("a"))
            await driver.wait_idle()

        asyncio.run(play())

        assert seen == ["answer", "next_question"]

    def test_failed_effect_is_logged(self, initial_state, services, caplog):
        """A generation failure leaves the state alone and is logged."""
        driver = GameDriver(
            State(question_items=tuple(make_items(3)), game_state=initial_state.game_state),
            Reducer(services=services),
        )

        async def play():
            driver.dispatch(start_game_action())
            await driver.wait_idle()

        with caplog.at_level(logging.ERROR):
            asyncio.run(play())

        assert driver.state.game_state is initial_state.game_state
        assert "Effect failed" in caplog.text

    def test_create_from_config(self, question_items, generator):
        config = GameConfig(num_questions=4, advance_delay_ms=0)

        driver = GameDriver.create(
            question_items, config, EffectServices.from_config(config, generator=generator)
        )

        game = driver.state.game_state
        assert game.current_question.question_id == "q1"
        assert game.total_questions == 4

    def test_create_with_defaults(self, question_items):
        driver = GameDriver.create(question_items)

        assert driver.state.game_state.total_questions == 6

    def test_failing_listener_does_not_stall_game(self, initial_state, services, caplog):
        """A listener that raises is logged and the answer still advances the game."""
        driver = make_driver(initial_state, services)

        def broken(state, action):
            raise RuntimeError("render failed")

        driver.subscribe(broken)

        async def play():
            driver.dispatch(answer_action("a"))
            assert driver.pending_effects == 1
            await driver.wait_idle()

        with caplog.at_level(logging.ERROR):
            asyncio.run(play())

        game = driver.state.game_state
        assert game.current_question.question_id == "q2"
        assert [aq.answer for aq in game.answered_questions] == ["a"]
        assert "State listener failed" in caplog.text
