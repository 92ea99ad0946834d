from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .collaborators import MenuNotifier, Session
from .editors.base import PageEditor
from .errors import (
    ControllerNotStartedError,
    InvalidTransitionError,
    NoActiveEditorError,
    PageNotFoundError,
)
from .models.form import AdminView, PageOption
from .models.page import PageType
from .page_store import PageStore
from .registry import DEFAULT_PAGE_TYPE, PAGE_TYPE_ORDER, resolve, resolve_type

logger = logging.getLogger(__name__)

CREATE_OPTION = "create"
ACCESS_DENIED_MESSAGE = "You must be logged in to view this page"
SAVED_MESSAGE = "Page saved!"
DELETED_MESSAGE = "Page deleted"


class Phase(str, Enum):
    uninitialized = "uninitialized"
    creating = "creating"
    editing = "editing"


@dataclass(frozen=True)
class ControllerState:
    phase: Phase
    page_type: PageType | None = None
    page_id: str | None = None


class FormController:
    """Drives the admin form for one authoring session.

    Owns the single active editor and decides when a draft is validated,
    persisted or deleted. Every operation runs to completion before the
    next user action is handled.
    """

    def __init__(
        self,
        *,
        store: PageStore,
        session: Session,
        menu: MenuNotifier,
        editor_factory: Callable[[PageType], PageEditor] = resolve,
    ) -> None:
        self._store = store
        self._session = session
        self._menu = menu
        self._editor_factory = editor_factory
        self._state = ControllerState(Phase.uninitialized)
        self._editor: PageEditor | None = None
        self._errors: dict[str, str] = {}
        self._message = ""

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def editor(self) -> PageEditor:
        if self._editor is None:
            raise NoActiveEditorError("editor")
        return self._editor

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def message(self) -> str:
        return self._message

    def start(self) -> AdminView:
        if not self._session.is_logged_in():
            logger.warning("Admin form requested without a login")
            return AdminView(message=ACCESS_DENIED_MESSAGE)
        if self._state.phase is Phase.uninitialized:
            self._enter_creating(DEFAULT_PAGE_TYPE)
        return self.view()

    def select_page(self, value: str) -> AdminView:
        """Handle the page selector: "create" or the id of a stored page."""
        if value == CREATE_OPTION:
            return self.select_create_new()
        return self.select_existing_page(value)

    def select_existing_page(self, page_id: str) -> AdminView:
        self._require_started("select_existing_page")
        page = self._store.find_page(page_id)
        if page is None:
            raise PageNotFoundError(page_id)
        page_type = resolve_type(page.type)
        editor = self._editor_factory(page_type)
        editor.load(page)
        self._editor = editor
        self._state = ControllerState(Phase.editing, page_type, page.id)
        self._errors = {}
        self._message = ""
        logger.info("Editing page", extra={"page_id": page.id, "page_type": page_type.value})
        return self.view()

    def select_create_new(self) -> AdminView:
        self._require_started("select_create_new")
        self._enter_creating(DEFAULT_PAGE_TYPE)
        return self.view()

    def change_type(self, new_type: PageType | str) -> AdminView:
        self._require_started("change_type")
        if self._state.phase is not Phase.creating:
            # The type of an existing page is fixed.
            raise InvalidTransitionError("change_type", self._state.phase.value)
        self._enter_creating(resolve_type(new_type))
        return self.view()

    def set_field(self, name: str, value: str) -> None:
        self.editor.set_field(name, value)

    def save(self) -> AdminView:
        if self._editor is None:
            raise NoActiveEditorError("save")
        self._errors = {}
        self._message = ""

        result = self._editor.validate()
        if not result.ok:
            self._errors = dict(result.errors)
            logger.info(
                "Page not saved, form has errors",
                extra={"page_type": self._editor.page_type.value, "fields": sorted(result.errors)},
            )
            return self.view()

        page = self._editor.collect_draft()
        self._store.set_page(page)
        self._menu.refresh()
        logger.info(
            "Saved page",
            extra={
                "page_id": page.id,
                "page_type": page.type,
                "mode": self._state.phase.value,
            },
        )

        self._editor.reset()
        self._enter_creating(DEFAULT_PAGE_TYPE)
        self._message = SAVED_MESSAGE
        return self.view()

    def delete_page(self) -> AdminView:
        if self._editor is None:
            raise NoActiveEditorError("delete_page")
        if self._state.phase is not Phase.editing or self._state.page_id is None:
            raise InvalidTransitionError("delete_page", self._state.phase.value)

        page_id = self._state.page_id
        self._store.remove_page(page_id)
        self._menu.refresh()
        logger.info("Deleted page", extra={"page_id": page_id})

        self._enter_creating(DEFAULT_PAGE_TYPE)
        self._message = DELETED_MESSAGE
        return self.view()

    def view(self) -> AdminView:
        if self._editor is None:
            return AdminView(message=self._message)
        editing = self._state.phase is Phase.editing
        return AdminView(
            page_options=self._page_options(),
            selected_page=self._state.page_id if editing else CREATE_OPTION,
            type_options=[PageOption(value=t.value, label=t.value.title()) for t in PAGE_TYPE_ORDER],
            selected_type=self._state.page_type,
            type_select_visible=not editing,
            delete_visible=editing,
            message=self._message,
            form=self._editor.view(self._errors),
        )

    def _enter_creating(self, page_type: PageType) -> None:
        editor = self._editor_factory(page_type)
        editor.present()
        self._editor = editor
        self._state = ControllerState(Phase.creating, page_type)
        self._errors = {}
        self._message = ""

    def _require_started(self, operation: str) -> None:
        if self._state.phase is Phase.uninitialized:
            raise ControllerNotStartedError(operation)

    def _page_options(self) -> list[PageOption]:
        options = [PageOption(value=CREATE_OPTION, label="Create new page")]
        options.extend(
            PageOption(value=summary.id, label=f"{summary.title} ({summary.type.value})")
            for summary in self._store.find_pages()
        )
        return options


__all__ = [
    "ACCESS_DENIED_MESSAGE",
    "CREATE_OPTION",
    "ControllerState",
    "FormController",
    "Phase",
]
