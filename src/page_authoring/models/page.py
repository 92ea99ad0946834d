from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class PageType(str, Enum):
    post = "post"
    image = "image"
    video = "video"
    slideshow = "slideshow"
    quiz = "quiz"


class _PageBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    id: str
    title: str


class PostPage(_PageBase):
    type: Literal["post"] = "post"
    content: str
    created: str


class ImagePage(_PageBase):
    type: Literal["image"] = "image"
    src: str


class VideoPage(_PageBase):
    type: Literal["video"] = "video"
    src: str
    content_type: str = Field(alias="contentType")


class Slide(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    src: str


class SlideshowPage(_PageBase):
    type: Literal["slideshow"] = "slideshow"
    images: Sequence[Slide] = Field(default_factory=list)


class Question(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    text: str
    correct_index: int = Field(alias="correctIndex")
    options: Sequence[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_correct_index(self) -> "Question":
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"correctIndex {self.correct_index} is outside the {len(self.options)} options"
            )
        return self


class QuizPage(_PageBase):
    type: Literal["quiz"] = "quiz"
    description: str
    questions: Sequence[Question] = Field(default_factory=list)
    # Filled in by the quiz-taking side of the site, never by the editor.
    current_answers: Sequence[Any] = Field(default_factory=list, alias="currentAnswers")
    answers: Sequence[Any] = Field(default_factory=list)


Page = Annotated[
    Union[PostPage, ImagePage, VideoPage, SlideshowPage, QuizPage],
    Field(discriminator="type"),
]

_page_adapter: TypeAdapter[Page] = TypeAdapter(Page)


class PageSummary(BaseModel):
    id: str
    title: str
    type: PageType

    @classmethod
    def from_page(cls, page: Page) -> "PageSummary":
        return cls(id=page.id, title=page.title, type=PageType(page.type))


def parse_page(data: Any) -> Page:
    """Validate a stored page record into its typed model."""
    return _page_adapter.validate_python(data)


def dump_page(page: Page) -> dict[str, Any]:
    """Dump a page in its persisted JSON shape (camelCase keys)."""
    return _page_adapter.dump_python(page, by_alias=True, mode="json")


__all__ = [
    "ImagePage",
    "Page",
    "PageSummary",
    "PageType",
    "PostPage",
    "Question",
    "QuizPage",
    "Slide",
    "SlideshowPage",
    "VideoPage",
    "dump_page",
    "parse_page",
]
