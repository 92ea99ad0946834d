from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, ClassVar, Mapping, Sequence

from ..errors import PageTypeMismatchError, UnknownFieldError
from ..identifiers import create_page_id, utc_timestamp
from ..models.form import CollectionView, FieldView, FormView
from ..models.page import Page, PageType
from ..validation import ValidationResult, check_required

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    # Name used in the "<name> is required" message.
    error_name: str
    multiline: bool = False


class PageEditor(ABC):
    """Editing contract shared by every page type.

    An editor holds the draft for one page type. It is either bound to an
    existing page (after load) or unbound (after present or reset), in which
    case collect_draft assigns a fresh id.
    """

    page_type: ClassVar[PageType]
    heading: ClassVar[str]
    fields: ClassVar[Sequence[FieldSpec]]

    def __init__(
        self,
        *,
        id_factory: Callable[[], str] = create_page_id,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock
        self._page: Page | None = None
        self._values: dict[str, str] = {}
        self._clear()

    @property
    def bound_page(self) -> Page | None:
        return self._page

    def present(self) -> FormView:
        self._page = None
        self._clear()
        return self.view()

    def load(self, page: Page) -> FormView:
        if page.type != self.page_type.value:
            raise PageTypeMismatchError(self.page_type.value, page.type)
        self._clear()
        self._page = page
        self._load(page)
        return self.view()

    def reset(self) -> None:
        self._page = None
        self._clear()

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        for spec in self.fields:
            check_required(result, spec.name, self._values[spec.name], spec.error_name)
        self._validate_rows(result)
        if not result.ok:
            logger.debug(
                "Draft failed validation",
                extra={"page_type": self.page_type.value, "fields": sorted(result.errors)},
            )
        return result

    def collect_draft(self) -> Page:
        page_id = self._page.id if self._page is not None else self._id_factory()
        return self._build_page(page_id)

    def view(self, errors: Mapping[str, str] | None = None) -> FormView:
        errors = errors or {}
        return FormView(
            page_type=self.page_type,
            heading=self.heading,
            fields=[
                FieldView(
                    name=spec.name,
                    label=spec.label,
                    value=self._values[spec.name],
                    error=errors.get(spec.name),
                    multiline=spec.multiline,
                )
                for spec in self.fields
            ],
            collections=self._collection_views(errors),
        )

    def set_field(self, name: str, value: str) -> None:
        if name not in self._values:
            raise UnknownFieldError(f"{self.page_type.value} form", name)
        self._values[name] = value

    def value(self, name: str) -> str:
        return self._values[name].strip()

    def _clear(self) -> None:
        self._values = {spec.name: "" for spec in self.fields}
        self._clear_rows()

    @abstractmethod
    def _load(self, page: Page) -> None:
        ...

    @abstractmethod
    def _build_page(self, page_id: str) -> Page:
        ...

    def _clear_rows(self) -> None:
        pass

    def _validate_rows(self, result: ValidationResult) -> None:
        pass

    def _collection_views(self, errors: Mapping[str, str]) -> list[CollectionView]:
        return []


__all__ = ["FieldSpec", "PageEditor"]
