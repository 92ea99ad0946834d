from pathlib import Path
from unittest.mock import patch

from page_authoring.config import AuthoringSettings, build_page_store
from page_authoring.page_store import InMemoryPageStore, LocalPageStore


def test_defaults(monkeypatch):
    for name in ("ENVIRONMENT", "PROJECT_ID", "PAGE_STORE", "PAGE_STORE_PATH", "ADMIN_LOGGED_IN"):
        monkeypatch.delenv(name, raising=False)

    settings = AuthoringSettings.from_env()

    assert settings.environment == "dev"
    assert settings.project_id is None
    assert settings.page_store == "memory"
    assert settings.page_store_path == Path("data/pages.json")
    assert settings.logged_in is True
    assert isinstance(build_page_store(settings), InMemoryPageStore)


def test_file_store_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("PAGE_STORE", "file")
    monkeypatch.setenv("PAGE_STORE_PATH", str(tmp_path / "pages.json"))
    monkeypatch.setenv("ADMIN_LOGGED_IN", "no")

    settings = AuthoringSettings.from_env()

    assert settings.logged_in is False
    assert isinstance(build_page_store(settings), LocalPageStore)


def test_firestore_store_uses_project_id():
    settings = AuthoringSettings(page_store="firestore", project_id="demo")

    with patch("page_authoring.config.FirestorePageStore") as store_cls:
        store = build_page_store(settings)

    store_cls.assert_called_once_with(project_id="demo")
    assert store is store_cls.return_value
