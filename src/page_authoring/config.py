from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .firestore_page_store import FirestorePageStore
from .page_store import InMemoryPageStore, LocalPageStore, PageStore

_TRUE_VALUES = {"1", "true", "yes", "on"}


class AuthoringSettings(BaseModel):
    environment: str = "dev"
    project_id: str | None = None
    page_store: Literal["memory", "file", "firestore"] = "memory"
    page_store_path: Path = Field(default=Path("data/pages.json"))
    logged_in: bool = True

    @classmethod
    def from_env(cls) -> "AuthoringSettings":
        return cls(
            environment=os.getenv("ENVIRONMENT", "dev"),
            project_id=os.getenv("PROJECT_ID"),
            page_store=os.getenv("PAGE_STORE", "memory"),
            page_store_path=Path(os.getenv("PAGE_STORE_PATH", "data/pages.json")),
            logged_in=os.getenv("ADMIN_LOGGED_IN", "true").strip().lower() in _TRUE_VALUES,
        )


def build_page_store(settings: AuthoringSettings) -> PageStore:
    if settings.page_store == "file":
        return LocalPageStore(path=settings.page_store_path.resolve())
    if settings.page_store == "firestore":
        return FirestorePageStore(project_id=settings.project_id)
    return InMemoryPageStore()


__all__ = ["AuthoringSettings", "build_page_store"]
