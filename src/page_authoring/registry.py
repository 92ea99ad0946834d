from __future__ import annotations

from typing import Callable, Mapping

from .editors.base import PageEditor
from .editors.image import ImageEditor
from .editors.post import PostEditor
from .editors.quiz import QuizEditor
from .editors.slideshow import SlideshowEditor
from .editors.video import VideoEditor
from .errors import UnknownPageTypeError
from .models.page import PageType

EDITORS: Mapping[PageType, Callable[..., PageEditor]] = {
    PageType.post: PostEditor,
    PageType.image: ImageEditor,
    PageType.video: VideoEditor,
    PageType.slideshow: SlideshowEditor,
    PageType.quiz: QuizEditor,
}

# Order of the page type selector in the admin form.
PAGE_TYPE_ORDER: tuple[PageType, ...] = (
    PageType.post,
    PageType.image,
    PageType.slideshow,
    PageType.quiz,
    PageType.video,
)

DEFAULT_PAGE_TYPE = PageType.post


def resolve_type(tag: PageType | str) -> PageType:
    try:
        return PageType(tag)
    except ValueError:
        raise UnknownPageTypeError(tag) from None


def resolve(tag: PageType | str, **editor_options) -> PageEditor:
    """Return a fresh editor for the page type tag.

    Unknown tags raise UnknownPageTypeError; the admin form only offers the
    five known types, so reaching this is a logic error.
    """
    return EDITORS[resolve_type(tag)](**editor_options)


__all__ = ["DEFAULT_PAGE_TYPE", "EDITORS", "PAGE_TYPE_ORDER", "resolve", "resolve_type"]
