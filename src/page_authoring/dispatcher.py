"""Display-side rendering of stored pages.

Post, image and video pages are rendered here from their own fields.
Slideshow and quiz pages have interactive displays of their own, so they are
handed to the injected PageDisplay collaborators untouched.
"""

from __future__ import annotations

from typing import Callable, Mapping, Protocol

from jinja2 import DictLoader, Environment, select_autoescape

from .models.page import ImagePage, Page, PostPage, QuizPage, SlideshowPage, VideoPage
from .page_store import PageStore

_TEMPLATES = {
    "home.html": "<h2>Home</h2><p>Welcome to the site.</p>",
    "not_found.html": "<h3>Not found</h3><p>Aww, we couldn't find that page. :(</p>",
    "post.html": (
        '<div class="post">'
        "<h3>{{ page.title }}</h3>"
        "<p>{{ page.content }}</p>"
        "<p>Posted on {{ page.created }}</p>"
        "</div>"
    ),
    "image.html": (
        '<div class="image">'
        "<h3>{{ page.title }}</h3>"
        '<p><img src="{{ page.src }}"></p>'
        "</div>"
    ),
    "video.html": (
        '<div class="video">'
        "<h3>{{ page.title }}</h3>"
        '<video width="640" height="480" controls>'
        '<source src="{{ page.src }}" type="{{ page.content_type }}">'
        "Your browser does not support this video"
        "</video>"
        "</div>"
    ),
}

# Templates are literal strings, autoescape everything rendered from them.
_env = Environment(
    loader=DictLoader(_TEMPLATES),
    autoescape=select_autoescape(default=True, default_for_string=True),
)


class PageDisplay(Protocol):
    def display(self, page: Page) -> str:
        ...


class PageDispatcher:
    def __init__(self, *, slideshow_display: PageDisplay, quiz_display: PageDisplay) -> None:
        self._slideshow_display = slideshow_display
        self._quiz_display = quiz_display
        self._renderers: Mapping[str, Callable[[Page], str]] = {
            "post": self.post,
            "image": self.image,
            "video": self.video,
            "slideshow": self.slideshow,
            "quiz": self.quiz,
        }

    def render(self, page: Page | None) -> str:
        if page is None:
            return self.not_found()
        renderer = self._renderers.get(getattr(page, "type", None))
        if renderer is None:
            return self.not_found()
        return renderer(page)

    def find_and_render(self, store: PageStore, page_id: str) -> str:
        return self.render(store.find_page(page_id))

    def home(self) -> str:
        return _env.get_template("home.html").render()

    def not_found(self) -> str:
        return _env.get_template("not_found.html").render()

    def post(self, page: PostPage) -> str:
        return _env.get_template("post.html").render(page=page)

    def image(self, page: ImagePage) -> str:
        return _env.get_template("image.html").render(page=page)

    def video(self, page: VideoPage) -> str:
        return _env.get_template("video.html").render(page=page)

    def slideshow(self, page: SlideshowPage) -> str:
        return self._slideshow_display.display(page)

    def quiz(self, page: QuizPage) -> str:
        return self._quiz_display.display(page)


__all__ = ["PageDispatcher", "PageDisplay"]
