from __future__ import annotations

from ..models.page import PageType, VideoPage
from .base import FieldSpec, PageEditor


class VideoEditor(PageEditor):
    page_type = PageType.video
    heading = "Video"
    fields = (
        FieldSpec("title", "Title", "Title"),
        FieldSpec("src", "Video URL", "URL"),
        FieldSpec("contentType", "Content-Type", "Content-type"),
    )

    def _load(self, page: VideoPage) -> None:
        self._values["title"] = page.title
        self._values["src"] = page.src
        self._values["contentType"] = page.content_type

    def _build_page(self, page_id: str) -> VideoPage:
        return VideoPage(
            id=page_id,
            title=self.value("title"),
            src=self.value("src"),
            content_type=self.value("contentType"),
        )


__all__ = ["VideoEditor"]
