"""Ordered, resizable row collections for the slideshow and quiz editors.

Rows are addressed by the RowHandle returned from add_item, never by
position, so removing one row leaves the handles of its siblings valid.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from typing import Callable, Generic, Iterator, TypeVar

from .errors import UnknownRowError

T = TypeVar("T")


@dataclass(frozen=True)
class RowHandle:
    key: str

    def __str__(self) -> str:
        return self.key


class EditableCollection(Generic[T]):
    def __init__(self, *, prefix: str, factory: Callable[[], T]) -> None:
        self._prefix = prefix
        self._factory = factory
        self._counter = itertools.count(1)
        self._rows: dict[RowHandle, T] = {}

    def add_item(self, initial: T | None = None) -> RowHandle:
        handle = RowHandle(f"{self._prefix}-{next(self._counter)}")
        self._rows[handle] = initial if initial is not None else self._factory()
        return handle

    def remove_item(self, handle: RowHandle) -> T:
        self._require(handle)
        return self._rows.pop(handle)

    def get(self, handle: RowHandle) -> T:
        self._require(handle)
        return self._rows[handle]

    def update(self, handle: RowHandle, **changes: object) -> T:
        row = replace(self.get(handle), **changes)
        self._rows[handle] = row
        return row

    def enumerate(self) -> list[T]:
        return list(self._rows.values())

    def rows(self) -> list[tuple[RowHandle, T]]:
        return list(self._rows.items())

    def handles(self) -> list[RowHandle]:
        return list(self._rows)

    def clear(self) -> None:
        # The counter keeps running so handles are never handed out twice.
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[tuple[RowHandle, T]]:
        return iter(self.rows())

    def __contains__(self, handle: object) -> bool:
        return handle in self._rows

    def _require(self, handle: RowHandle) -> None:
        if handle not in self:
            raise UnknownRowError(handle, self._prefix)


@dataclass
class SlideDraft:
    title: str = ""
    src: str = ""


@dataclass
class AnswerDraft:
    text: str = ""


def _answer_collection() -> EditableCollection[AnswerDraft]:
    return EditableCollection(prefix="answer", factory=AnswerDraft)


@dataclass
class QuestionDraft:
    text: str = ""
    correct: str = ""
    answers: EditableCollection[AnswerDraft] = field(default_factory=_answer_collection)


__all__ = ["AnswerDraft", "EditableCollection", "QuestionDraft", "RowHandle", "SlideDraft"]
