from __future__ import annotations

import logging

from google.cloud import firestore

from .models.page import Page, PageSummary, dump_page, parse_page

logger = logging.getLogger(__name__)


class FirestorePageStore:
    """Firestore-backed page store for the hosted site."""

    COLLECTION_NAME = "pages"

    def __init__(self, project_id: str | None = None) -> None:
        self._db = firestore.Client(project=project_id)
        self._collection = self._db.collection(self.COLLECTION_NAME)

    def set_page(self, page: Page) -> None:
        """Create or replace the page document keyed by its id."""
        doc_ref = self._collection.document(page.id)
        data = dump_page(page)

        # Keep the first write time so edits do not reorder the page list.
        existing = doc_ref.get()
        stored_at = existing.to_dict().get("stored_at") if existing.exists else None
        data["stored_at"] = stored_at or firestore.SERVER_TIMESTAMP
        doc_ref.set(data)

        logger.info(
            "Stored page",
            extra={"page_id": page.id, "page_type": page.type},
        )

    def find_page(self, page_id: str) -> Page | None:
        """Retrieve a page by id, or None when it does not exist."""
        doc = self._collection.document(page_id).get()

        if not doc.exists:
            return None

        return self._from_firestore_dict(doc.id, doc.to_dict())

    def find_pages(self) -> list[PageSummary]:
        """List page summaries in the order they were first stored."""
        query = self._collection.order_by("stored_at", direction=firestore.Query.ASCENDING)

        return [
            PageSummary(id=doc.id, title=data["title"], type=data["type"])
            for doc in query.stream()
            if (data := doc.to_dict()) is not None
        ]

    def remove_page(self, page_id: str) -> None:
        self._collection.document(page_id).delete()

        logger.info("Removed page", extra={"page_id": page_id})

    def _from_firestore_dict(self, page_id: str, data: dict) -> Page:
        """Convert a Firestore document dict to a typed page."""
        record = {key: value for key, value in data.items() if key != "stored_at"}
        record["id"] = page_id
        return parse_page(record)


__all__ = ["FirestorePageStore"]
