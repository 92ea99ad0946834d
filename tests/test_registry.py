import pytest

from page_authoring.editors.quiz import QuizEditor
from page_authoring.editors.slideshow import SlideshowEditor
from page_authoring.errors import UnknownPageTypeError
from page_authoring.models.page import PageType
from page_authoring.registry import PAGE_TYPE_ORDER, resolve


@pytest.mark.parametrize("page_type", list(PageType))
def test_resolve_covers_every_page_type(page_type):
    editor = resolve(page_type)

    assert editor.page_type is page_type


def test_resolve_accepts_string_tags():
    assert isinstance(resolve("quiz"), QuizEditor)
    assert isinstance(resolve("slideshow"), SlideshowEditor)


def test_resolve_returns_fresh_editors():
    assert resolve("post") is not resolve("post")


@pytest.mark.parametrize("tag", ["heroes", "", "Post", None])
def test_unknown_tag_is_fatal(tag):
    with pytest.raises(UnknownPageTypeError):
        resolve(tag)


def test_selector_order_lists_every_type_once():
    assert [t.value for t in PAGE_TYPE_ORDER] == ["post", "image", "slideshow", "quiz", "video"]
