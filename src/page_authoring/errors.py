"""Typed exception hierarchy for page authoring.

Every exception raised by this package inherits from PageAuthoringError.
These signal logic defects (the UI offered an action it should not have)
or store failures; user input problems are reported through
ValidationResult instead and never raised.
"""

from typing import Optional


class PageAuthoringError(Exception):
    """Base exception for all page authoring errors."""
    pass


class UnknownPageTypeError(PageAuthoringError):
    """Raised when a page type tag has no registered editor."""

    def __init__(self, page_type: object):
        super().__init__(f"Form type not found: {page_type!r}")
        self.page_type = page_type


class PageTypeMismatchError(PageAuthoringError):
    """Raised when an editor is asked to load a page of another type."""

    def __init__(self, editor_type: str, page_type: str):
        super().__init__(f"A {editor_type} editor cannot load a {page_type} page")
        self.editor_type = editor_type
        self.page_type = page_type


class UnknownFieldError(PageAuthoringError):
    """Raised when a form or row has no field of the given name."""

    def __init__(self, owner: str, name: str):
        super().__init__(f"{owner} has no field {name!r}")
        self.owner = owner
        self.name = name


class NoActiveEditorError(PageAuthoringError):
    """Raised when an operation needs an active editor and there is none."""

    def __init__(self, operation: str):
        super().__init__(f"Current page not set (operation '{operation}')")
        self.operation = operation


class ControllerNotStartedError(PageAuthoringError):
    """Raised when the form controller is used before start() succeeded."""

    def __init__(self, operation: str):
        super().__init__(f"Form controller not started (operation '{operation}')")
        self.operation = operation


class InvalidTransitionError(PageAuthoringError):
    """Raised when an operation is not legal in the controller's current phase."""

    def __init__(self, operation: str, phase: str):
        super().__init__(f"Operation '{operation}' is not allowed while {phase}")
        self.operation = operation
        self.phase = phase


class PageNotFoundError(PageAuthoringError):
    """Raised when a page id does not exist in the store."""

    def __init__(self, page_id: str):
        super().__init__(f"Page not found: {page_id}")
        self.page_id = page_id


class UnknownRowError(PageAuthoringError):
    """Raised when a row handle does not belong to a collection."""

    def __init__(self, handle: object, collection: Optional[str] = None):
        message = f"Unknown row {handle}"
        if collection:
            message += f" in {collection}"
        super().__init__(message)
        self.handle = handle
        self.collection = collection


class PageStoreError(PageAuthoringError):
    """Raised when the backing page store cannot complete an operation."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Page store operation '{operation}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.operation = operation
        self.reason = reason
