"""
Pool Loader - Reads a question-item pool from JSON.

Accepted shapes:
    {"items": [{"id": "...", "prompt": "...", "answer": "..."}, ...]}
    [{"id": "...", "prompt": "...", "answer": "..."}, ...]

The file is validated with pydantic before any QuestionItem is built.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any
import json

from pydantic import BaseModel, Field, ValidationError, model_validator

from .models import QuestionItem


class PoolLoadError(Exception):
    """A pool file could not be read or failed validation."""
    pass


class QuestionItemSchema(BaseModel):
    """One pool entry as written in the file."""
    id: str = Field(min_length=1)
    prompt: str = Field(min_length=1)
    answer: str = Field(min_length=1)

    def to_item(self) -> QuestionItem:
        return QuestionItem(item_id=self.id, prompt=self.prompt, answer=self.answer)


class QuestionPoolSchema(BaseModel):
    """A whole pool file."""
    items: list[QuestionItemSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> QuestionPoolSchema:
        seen: set[str] = set()
        for item in self.items:
            if item.id in seen:
                raise ValueError(f"Duplicate question item id: {item.id}")
            seen.add(item.id)
        return self


def parse_pool(data: Any) -> list[QuestionItem]:
    """Validate already-decoded JSON data and build the item pool."""
    if isinstance(data, list):
        data = {"items": data}
    try:
        pool = QuestionPoolSchema.model_validate(data)
    except ValidationError as e:
        raise PoolLoadError(f"Invalid question pool: {e}") from e
    return [item.to_item() for item in pool.items]


def load_pool(path: str | Path) -> list[QuestionItem]:
    """Load a question-item pool from a JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise PoolLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise PoolLoadError(f"{path} is not valid JSON: {e}") from e

    try:
        return parse_pool(data)
    except PoolLoadError as e:
        raise PoolLoadError(f"{path}: {e}") from e
