from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Protocol

from .errors import PageStoreError
from .models.page import Page, PageSummary, dump_page, parse_page

logger = logging.getLogger(__name__)


class PageStore(Protocol):
    def set_page(self, page: Page) -> None:
        ...

    def find_page(self, page_id: str) -> Page | None:
        ...

    def find_pages(self) -> list[PageSummary]:
        ...

    def remove_page(self, page_id: str) -> None:
        ...


class InMemoryPageStore:
    def __init__(self) -> None:
        self._pages: Dict[str, Page] = {}
        self._lock = threading.Lock()

    def set_page(self, page: Page) -> None:
        with self._lock:
            self._pages[page.id] = page

    def find_page(self, page_id: str) -> Page | None:
        with self._lock:
            return self._pages.get(page_id)

    def find_pages(self) -> list[PageSummary]:
        with self._lock:
            return [PageSummary.from_page(page) for page in self._pages.values()]

    def remove_page(self, page_id: str) -> None:
        with self._lock:
            self._pages.pop(page_id, None)


class LocalPageStore:
    """Pages kept as one JSON document on disk, keyed by id in write order."""

    def __init__(self, *, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()

    def set_page(self, page: Page) -> None:
        with self._lock:
            records = self._read()
            records[page.id] = dump_page(page)
            self._write(records)
        logger.info("Stored page", extra={"page_id": page.id, "page_type": page.type})

    def find_page(self, page_id: str) -> Page | None:
        with self._lock:
            record = self._read().get(page_id)
        return parse_page(record) if record is not None else None

    def find_pages(self) -> list[PageSummary]:
        with self._lock:
            records = self._read()
        return [
            PageSummary(id=record["id"], title=record["title"], type=record["type"])
            for record in records.values()
        ]

    def remove_page(self, page_id: str) -> None:
        with self._lock:
            records = self._read()
            if records.pop(page_id, None) is not None:
                self._write(records)
        logger.info("Removed page", extra={"page_id": page_id})

    def _read(self) -> dict[str, dict]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, json.JSONDecodeError) as exc:
            raise PageStoreError("read", f"{self._path}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("pages", []), list):
            raise PageStoreError("read", f"{self._path}: expected an object with a \"pages\" list")
        return {record["id"]: record for record in data.get("pages", [])}

    def _write(self, records: dict[str, dict]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as fp:
                json.dump({"pages": list(records.values())}, fp, ensure_ascii=False, indent=2)
        except OSError as exc:
            raise PageStoreError("write", f"{self._path}: {exc}") from exc


__all__ = ["InMemoryPageStore", "LocalPageStore", "PageStore"]
