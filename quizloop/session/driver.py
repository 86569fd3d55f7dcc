"""
Game Driver - The asyncio loop around the reducer.

The loop:
1. An action is dispatched (by the player or by a resolved effect)
2. The reducer returns the next state and any effects
3. The driver stores the state and notifies listeners
4. Each effect runs as its own asyncio task
5. Actions an effect yields are dispatched back into step 1

Single writer: only dispatch() replaces the state, one action at a
time, in dispatch order. In-flight effects are never cancelled; stale
ones resolve into no-ops because the reducer re-checks every pre-state.
"""

from __future__ import annotations
from typing import Callable, Sequence
import asyncio
import logging

from ..config import GameConfig
from ..engine_core.action import Action
from ..engine_core.effects import Effect, EffectServices
from ..engine_core.reducer import Reducer
from ..engine_core.state import State, init_state
from ..questions.models import QuestionItem

logger = logging.getLogger(__name__)


StateListener = Callable[[State, Action], None]


class GameDriver:
    """
    Owns the current State and runs the effect loop.

    Usage:
        driver = GameDriver.create(items, GameConfig())
        driver.subscribe(render)

        driver.dispatch(answer_action("a"))
        await driver.wait_idle()
    """

    def __init__(self, state: State, reducer: Reducer | None = None):
        self._state = state
        self.reducer = reducer or Reducer()
        self._tasks: set[asyncio.Task] = set()
        self._listeners: list[StateListener] = []

    @classmethod
    def create(
        cls,
        question_items: Sequence[QuestionItem],
        config: GameConfig | None = None,
        services: EffectServices | None = None,
    ) -> GameDriver:
        """Build the initial state and a reducer sharing the same services."""
        config = config or GameConfig()
        services = services or EffectServices.from_config(config)
        state = init_state(
            question_items,
            num_questions=services.num_questions,
            generator=services.generator,
        )
        return cls(state, Reducer(services=services))

    @property
    def state(self) -> State:
        return self._state

    @property
    def pending_effects(self) -> int:
        """Number of effects still running."""
        return len(self._tasks)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call `listener(state, action)` after every state change. Returns an unsubscribe."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, action: Action) -> State:
        """
        Apply one action and schedule its effects.

        Must be called from inside a running event loop when the
        action can produce effects.
        """
        logger.debug("Dispatching %s", getattr(action, "tag", action))
        result = self.reducer.apply(self._state, action)

        changed = result.state is not self._state
        self._state = result.state

        for effect in result.effects:
            self._schedule(effect)

        if changed:
            for listener in list(self._listeners):
                try:
                    listener(self._state, action)
                except Exception:
                    logger.exception("State listener failed")
        return self._state

    def _schedule(self, effect: Effect):
        task = asyncio.get_running_loop().create_task(self._run_effect(effect))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_effect(self, effect: Effect):
        try:
            actions = await effect()
        except Exception:
            logger.exception("Effect failed; no actions dispatched")
            return

        for action in actions:
            self.dispatch(action)

    async def wait_idle(self):
        """Wait until no effects are running, including ones scheduled meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
