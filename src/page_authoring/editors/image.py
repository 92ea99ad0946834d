from __future__ import annotations

from ..models.page import ImagePage, PageType
from .base import FieldSpec, PageEditor


class ImageEditor(PageEditor):
    page_type = PageType.image
    heading = "Image"
    fields = (
        FieldSpec("title", "Title", "Title"),
        FieldSpec("src", "Image URL", "URL"),
    )

    def _load(self, page: ImagePage) -> None:
        self._values["title"] = page.title
        self._values["src"] = page.src

    def _build_page(self, page_id: str) -> ImagePage:
        return ImagePage(id=page_id, title=self.value("title"), src=self.value("src"))


__all__ = ["ImageEditor"]
