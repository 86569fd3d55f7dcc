"""
Questions - Quiz data types and question generation.

Question items are the raw pool a game draws from. A generator turns
items into multiple-choice questions; the engine only compares a
submitted answer against each question's correct option.
"""

from .models import Answer, AnsweredQuestion, Option, Question, QuestionItem
from .generator import (
    InsufficientPoolError,
    QuestionGenerator,
    RandomQuestionGenerator,
    SequentialQuestionGenerator,
    make_questions,
)
from .loader import PoolLoadError, load_pool, parse_pool

__all__ = [
    "Answer",
    "AnsweredQuestion",
    "Option",
    "Question",
    "QuestionItem",
    "InsufficientPoolError",
    "QuestionGenerator",
    "RandomQuestionGenerator",
    "SequentialQuestionGenerator",
    "make_questions",
    "PoolLoadError",
    "load_pool",
    "parse_pool",
]
