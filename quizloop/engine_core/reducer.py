"""
Reducer - Applies actions to quiz state.

The reducer is the single point of state mutation.
All state changes must go through reducer() / Reducer.apply().

Design principles:
- Pure and synchronous: (state, action) -> (new state, effects)
- Total: never raises; out-of-order or stale actions are no-ops
- Side effects are returned as data for the driver to run

Effects resolve against whatever state is current when their actions
arrive, so every handler re-checks its pre-state before changing anything.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .action import Action, ActionType
from .effects import Effect, EffectServices, advance_after_answer, generate_new_game
from ..questions.models import AnsweredQuestion
from .state import GameEnded, GameInProgress, State

logger = logging.getLogger(__name__)


@dataclass
class ReducerResult:
    """Next state plus the effects the transition scheduled."""
    state: State
    effects: list[Effect] = field(default_factory=list)

    @classmethod
    def no_effects(cls, state: State) -> ReducerResult:
        return cls(state=state, effects=[])


@dataclass
class Reducer:
    """
    Reducer applies actions to quiz state.

    Stateless - all state is in State.
    Services are only captured by the effects it builds.
    """
    services: EffectServices = field(default_factory=EffectServices)

    def apply(self, state: State, action: Action) -> ReducerResult:
        """Apply an action. Unknown action types leave state untouched."""
        action_type = getattr(action, "action_type", None)
        handler = self._get_handler(action_type) if isinstance(action_type, ActionType) else None
        if not handler:
            logger.debug("Ignoring unrecognized action: %r", action)
            return ReducerResult.no_effects(state)
        return handler(state, action)

    def _get_handler(self, action_type):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.START_GAME: self._handle_start_game,
            ActionType.NEW_GAME: self._handle_new_game,
            ActionType.ANSWER: self._handle_answer,
            ActionType.NEXT_QUESTION: self._handle_next_question,
        }
        return handlers.get(action_type)

    def _handle_start_game(self, state: State, action: Action) -> ReducerResult:
        """Keep the state; schedule generation of a fresh question list."""
        return ReducerResult(
            state=state,
            effects=[generate_new_game(state.question_items, self.services)],
        )

    def _handle_new_game(self, state: State, action: Action) -> ReducerResult:
        """Replace whatever game is there with a fresh one."""
        if not action.questions:
            logger.debug("new_game without questions, ignored")
            return ReducerResult.no_effects(state)

        return ReducerResult.no_effects(
            state.with_game_state(GameInProgress.start(action.questions))
        )

    def _handle_answer(self, state: State, action: Action) -> ReducerResult:
        """Record the first answer to the current question."""
        game = state.game_state
        if not isinstance(game, GameInProgress):
            logger.debug("answer in %s state, ignored", game.tag.value)
            return ReducerResult.no_effects(state)
        if game.is_answered:
            logger.debug("Question %s already answered", game.current_question.question_id)
            return ReducerResult.no_effects(state)
        if action.answer is None:
            return ReducerResult.no_effects(state)

        is_correct = game.current_question.is_correct(action.answer)
        return ReducerResult(
            state=state.with_game_state(game.with_answer(action.answer)),
            effects=[advance_after_answer(is_correct, self.services)],
        )

    def _handle_next_question(self, state: State, action: Action) -> ReducerResult:
        """Move the answered question behind and bring up the next one."""
        game = state.game_state
        if not isinstance(game, GameInProgress):
            logger.debug("next_question in %s state, ignored", game.tag.value)
            return ReducerResult.no_effects(state)
        if not game.is_answered:
            logger.debug("next_question before an answer, ignored")
            return ReducerResult.no_effects(state)

        answered = (
            AnsweredQuestion(question=game.current_question, answer=game.current_answer),
        ) + game.answered_questions

        if not game.next_questions:
            return ReducerResult.no_effects(
                state.with_game_state(GameEnded(answered_questions=answered))
            )

        head, *tail = game.next_questions
        return ReducerResult.no_effects(
            state.with_game_state(
                GameInProgress(
                    current_question=head,
                    answered_questions=answered,
                    current_answer=None,
                    next_questions=tuple(tail),
                )
            )
        )


def reducer(
    state: State, action: Action, services: EffectServices | None = None
) -> ReducerResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    return Reducer(services=services or EffectServices()).apply(state, action)
