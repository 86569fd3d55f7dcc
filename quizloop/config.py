"""
Game Configuration.

Defaults match the standard game: 6 questions per game, 1500 ms pause
after each answer, 4 options per question.

Environment variables (all optional):
    QUIZLOOP_NUM_QUESTIONS
    QUIZLOOP_ADVANCE_DELAY_MS
    QUIZLOOP_OPTIONS_PER_QUESTION
    QUIZLOOP_SEED
"""

from __future__ import annotations
from typing import Optional
import os

from pydantic import BaseModel, Field


DEFAULT_NUM_QUESTIONS = 6
DEFAULT_ADVANCE_DELAY_MS = 1500
DEFAULT_OPTIONS_PER_QUESTION = 4


class GameConfig(BaseModel):
    """Tunable game parameters."""
    num_questions: int = Field(DEFAULT_NUM_QUESTIONS, ge=1)
    advance_delay_ms: int = Field(DEFAULT_ADVANCE_DELAY_MS, ge=0)
    options_per_question: int = Field(DEFAULT_OPTIONS_PER_QUESTION, ge=2, le=26)
    seed: Optional[int] = Field(None, description="Seed for reproducible question order")

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **overrides) -> GameConfig:
        """
        Build a config from QUIZLOOP_* environment variables.

        Keyword overrides that are not None win over the environment.
        """
        env = os.environ if environ is None else environ
        values = {}
        for field_name, var in (
            ("num_questions", "QUIZLOOP_NUM_QUESTIONS"),
            ("advance_delay_ms", "QUIZLOOP_ADVANCE_DELAY_MS"),
            ("options_per_question", "QUIZLOOP_OPTIONS_PER_QUESTION"),
            ("seed", "QUIZLOOP_SEED"),
        ):
            raw = env.get(var)
            if raw not in (None, ""):
                values[field_name] = raw

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
