from __future__ import annotations

from typing import Mapping

from ..collections import AnswerDraft, EditableCollection, QuestionDraft, RowHandle
from ..errors import UnknownFieldError
from ..models.form import CollectionView, FieldView, RowView
from ..models.page import PageType, Question, QuizPage
from ..validation import ValidationResult, check_answer_number, required
from .base import FieldSpec, PageEditor


def answer_key(question: RowHandle, answer: RowHandle) -> str:
    """Error key of an answer row, scoped to its question."""
    return f"{question.key}/{answer.key}"


class QuizEditor(PageEditor):
    """Quiz form: title, description and a list of questions.

    Each question row owns its own answer rows. The user enters the correct
    answer as a 1-based number which is stored as a zero-based correctIndex.
    """

    page_type = PageType.quiz
    heading = "Quiz"
    fields = (
        FieldSpec("title", "Title", "Title"),
        FieldSpec("description", "Description", "Description"),
    )

    def __init__(self, **kwargs) -> None:
        self._questions: EditableCollection[QuestionDraft] = EditableCollection(
            prefix="question", factory=QuestionDraft
        )
        super().__init__(**kwargs)

    @property
    def questions(self) -> EditableCollection[QuestionDraft]:
        return self._questions

    def add_question(self, initial: Question | None = None) -> RowHandle:
        if initial is None:
            return self._questions.add_item()
        draft = QuestionDraft(text=initial.text, correct=str(initial.correct_index + 1))
        for option in initial.options:
            draft.answers.add_item(AnswerDraft(text=option))
        return self._questions.add_item(draft)

    def remove_question(self, handle: RowHandle) -> None:
        self._questions.remove_item(handle)

    def set_question_field(self, handle: RowHandle, name: str, value: str) -> None:
        if name not in ("text", "correct"):
            raise UnknownFieldError("question", name)
        self._questions.update(handle, **{name: value})

    def add_answer(self, question: RowHandle, text: str | None = None) -> RowHandle:
        answers = self._questions.get(question).answers
        return answers.add_item(AnswerDraft(text=text) if text is not None else None)

    def remove_answer(self, question: RowHandle, answer: RowHandle) -> None:
        self._questions.get(question).answers.remove_item(answer)

    def set_answer_text(self, question: RowHandle, answer: RowHandle, text: str) -> None:
        self._questions.get(question).answers.update(answer, text=text)

    def _clear_rows(self) -> None:
        self._questions.clear()

    def _load(self, page: QuizPage) -> None:
        self._values["title"] = page.title
        self._values["description"] = page.description
        for question in page.questions:
            self.add_question(question)

    def _validate_rows(self, result: ValidationResult) -> None:
        for handle, question in self._questions:
            if not required(question.text):
                result.add(handle.key, "Question is required")
            else:
                message = check_answer_number(question.correct, len(question.answers))
                if message:
                    result.add(handle.key, message)
            for answer_handle, answer in question.answers:
                if not required(answer.text):
                    result.add(answer_key(handle, answer_handle), "Answer is required")

    def _build_page(self, page_id: str) -> QuizPage:
        # Only called after validate() passed, so correct parses and is in range.
        questions = [
            Question(
                text=question.text.strip(),
                correct_index=int(question.correct.strip()) - 1,
                options=[answer.text.strip() for answer in question.answers.enumerate()],
            )
            for question in self._questions.enumerate()
        ]
        return QuizPage(
            id=page_id,
            title=self.value("title"),
            description=self.value("description"),
            questions=questions,
            current_answers=[],
            answers=[],
        )

    def _collection_views(self, errors: Mapping[str, str]) -> list[CollectionView]:
        rows = []
        for handle, question in self._questions:
            answer_rows = [
                RowView(
                    handle=answer_key(handle, answer_handle),
                    fields=[
                        FieldView(
                            name="text", label="Answer", value=answer.text, placeholder="Answer text"
                        )
                    ],
                    error=errors.get(answer_key(handle, answer_handle)),
                )
                for answer_handle, answer in question.answers
            ]
            rows.append(
                RowView(
                    handle=handle.key,
                    fields=[
                        FieldView(
                            name="text",
                            label="Question",
                            value=question.text,
                            placeholder="Question text",
                        ),
                        FieldView(
                            name="correct",
                            label="Correct Answer",
                            value=question.correct,
                            placeholder="Correct Answer",
                        ),
                    ],
                    error=errors.get(handle.key),
                    rows=answer_rows,
                    add_label="Add Answer",
                )
            )
        return [CollectionView(name="questions", label="Questions", rows=rows, add_label="Add Question")]


__all__ = ["QuizEditor", "answer_key"]
