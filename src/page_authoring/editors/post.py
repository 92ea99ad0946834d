from __future__ import annotations

from ..models.page import PageType, PostPage
from .base import FieldSpec, PageEditor


class PostEditor(PageEditor):
    page_type = PageType.post
    heading = "Post"
    fields = (
        FieldSpec("title", "Title", "Title"),
        FieldSpec("content", "Content", "Content", multiline=True),
    )

    def _load(self, page: PostPage) -> None:
        self._values["title"] = page.title
        self._values["content"] = page.content

    def _build_page(self, page_id: str) -> PostPage:
        # Edits keep the original creation time.
        created = self._page.created if self._page is not None else self._clock()
        return PostPage(
            id=page_id,
            title=self.value("title"),
            content=self.value("content"),
            created=created,
        )


__all__ = ["PostEditor"]
