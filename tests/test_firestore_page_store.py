from unittest.mock import MagicMock, patch

import pytest

from page_authoring.firestore_page_store import FirestorePageStore
from page_authoring.models.page import ImagePage, PageSummary, PageType


def make_doc(doc_id, data, exists=True):
    doc = MagicMock()
    doc.id = doc_id
    doc.exists = exists
    doc.to_dict.return_value = data
    return doc


@pytest.fixture
def collection():
    with patch("page_authoring.firestore_page_store.firestore") as firestore_mock:
        collection = MagicMock()
        firestore_mock.Client.return_value.collection.return_value = collection
        firestore_mock.SERVER_TIMESTAMP = "SERVER_TIMESTAMP"
        yield collection


def test_set_page_writes_persisted_shape(collection):
    doc_ref = collection.document.return_value
    doc_ref.get.return_value = make_doc("1", None, exists=False)
    store = FirestorePageStore(project_id="demo")

    store.set_page(ImagePage(id="1", title="Cat", src="cat.png"))

    collection.document.assert_called_with("1")
    doc_ref.set.assert_called_once_with(
        {"id": "1", "type": "image", "title": "Cat", "src": "cat.png", "stored_at": "SERVER_TIMESTAMP"}
    )


def test_set_page_keeps_first_write_time(collection):
    doc_ref = collection.document.return_value
    doc_ref.get.return_value = make_doc("1", {"stored_at": "earlier"})
    store = FirestorePageStore(project_id="demo")

    store.set_page(ImagePage(id="1", title="Kitten", src="cat.png"))

    assert doc_ref.set.call_args.args[0]["stored_at"] == "earlier"


def test_find_page_parses_document(collection):
    collection.document.return_value.get.return_value = make_doc(
        "1", {"type": "image", "title": "Cat", "src": "cat.png", "stored_at": "t"}
    )
    store = FirestorePageStore(project_id="demo")

    assert store.find_page("1") == ImagePage(id="1", title="Cat", src="cat.png")


def test_find_page_missing(collection):
    collection.document.return_value.get.return_value = make_doc("1", None, exists=False)
    store = FirestorePageStore(project_id="demo")

    assert store.find_page("1") is None


def test_find_pages_returns_summaries(collection):
    collection.order_by.return_value.stream.return_value = [
        make_doc("1", {"type": "image", "title": "Cat", "src": "c"}),
        make_doc("2", {"type": "post", "title": "Hi", "content": "x", "created": "t"}),
    ]
    store = FirestorePageStore(project_id="demo")

    assert store.find_pages() == [
        PageSummary(id="1", title="Cat", type=PageType.image),
        PageSummary(id="2", title="Hi", type=PageType.post),
    ]


def test_remove_page_deletes_document(collection):
    store = FirestorePageStore(project_id="demo")

    store.remove_page("1")

    collection.document.assert_called_with("1")
    collection.document.return_value.delete.assert_called_once_with()
