"""Pydantic models shared across the client and controller layers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, TypeAdapter


class SearchField(str, Enum):
    AUTHOR = "author"
    TITLE = "title"


class Poem(BaseModel):
    """One poem as served by PoetryDB."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    author: str
    lines: list[str]
    # PoetryDB reports the count as text; it is not cross-checked against ``lines``.
    linecount: str

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


PoemList = TypeAdapter(list[Poem])


__all__ = [
    "Poem",
    "PoemList",
    "SearchField",
]
