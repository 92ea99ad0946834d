from __future__ import annotations

from typing import Mapping

from ..collections import EditableCollection, RowHandle, SlideDraft
from ..errors import UnknownFieldError
from ..models.form import CollectionView, FieldView, RowView
from ..models.page import PageType, Slide, SlideshowPage
from ..validation import ValidationResult, required
from .base import FieldSpec, PageEditor


class SlideshowEditor(PageEditor):
    page_type = PageType.slideshow
    heading = "Slideshow"
    fields = (FieldSpec("title", "Title", "Title"),)

    def __init__(self, **kwargs) -> None:
        self._slides: EditableCollection[SlideDraft] = EditableCollection(
            prefix="slide", factory=SlideDraft
        )
        super().__init__(**kwargs)

    @property
    def slides(self) -> EditableCollection[SlideDraft]:
        return self._slides

    def add_slide(self, initial: SlideDraft | None = None) -> RowHandle:
        return self._slides.add_item(initial)

    def remove_slide(self, handle: RowHandle) -> None:
        self._slides.remove_item(handle)

    def set_slide_field(self, handle: RowHandle, name: str, value: str) -> None:
        if name not in ("title", "src"):
            raise UnknownFieldError("slide", name)
        self._slides.update(handle, **{name: value})

    def _clear_rows(self) -> None:
        self._slides.clear()

    def _load(self, page: SlideshowPage) -> None:
        self._values["title"] = page.title
        for image in page.images:
            self._slides.add_item(SlideDraft(title=image.title, src=image.src))

    def _validate_rows(self, result: ValidationResult) -> None:
        for handle, slide in self._slides:
            if not required(slide.title):
                result.add(handle.key, "Title is required")
            elif not required(slide.src):
                result.add(handle.key, "URL is required")

    def _build_page(self, page_id: str) -> SlideshowPage:
        return SlideshowPage(
            id=page_id,
            title=self.value("title"),
            images=[
                Slide(title=slide.title.strip(), src=slide.src.strip())
                for slide in self._slides.enumerate()
            ],
        )

    def _collection_views(self, errors: Mapping[str, str]) -> list[CollectionView]:
        rows = [
            RowView(
                handle=handle.key,
                fields=[
                    FieldView(name="title", label="Title", value=slide.title, placeholder="Title"),
                    FieldView(name="src", label="URL", value=slide.src, placeholder="URL"),
                ],
                error=errors.get(handle.key),
            )
            for handle, slide in self._slides
        ]
        return [
            CollectionView(name="slides", label="Slideshow Images", rows=rows, add_label="Add Slide")
        ]


__all__ = ["SlideshowEditor"]
