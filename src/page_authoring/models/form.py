from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field

from ..errors import UnknownFieldError
from .page import PageType


class FieldView(BaseModel):
    name: str
    label: str
    value: str = ""
    error: str | None = None
    multiline: bool = False
    placeholder: str | None = None


class RowView(BaseModel):
    handle: str
    fields: Sequence[FieldView] = Field(default_factory=list)
    error: str | None = None
    rows: Sequence["RowView"] = Field(default_factory=list)
    add_label: str | None = None


RowView.model_rebuild()


class CollectionView(BaseModel):
    name: str
    label: str
    rows: Sequence[RowView] = Field(default_factory=list)
    add_label: str


class FormView(BaseModel):
    page_type: PageType
    heading: str
    fields: Sequence[FieldView] = Field(default_factory=list)
    collections: Sequence[CollectionView] = Field(default_factory=list)

    def field(self, name: str) -> FieldView:
        for item in self.fields:
            if item.name == name:
                return item
        raise UnknownFieldError(f"{self.page_type.value} form", name)


class PageOption(BaseModel):
    value: str
    label: str


class AdminView(BaseModel):
    heading: str = "Manage Pages"
    page_options: Sequence[PageOption] = Field(default_factory=list)
    selected_page: str = "create"
    type_options: Sequence[PageOption] = Field(default_factory=list)
    selected_type: PageType | None = None
    type_select_visible: bool = True
    delete_visible: bool = False
    message: str = ""
    form: FormView | None = None


__all__ = ["AdminView", "CollectionView", "FieldView", "FormView", "PageOption", "RowView"]
