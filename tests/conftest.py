"""Pytest configuration and shared fixtures."""

import io
import threading

import pytest
from werkzeug.datastructures import FileStorage

from storefront.app import create_app
from storefront.config.database import db
from storefront.config.settings import DealConfig


class FakeMediaStore:
    """In-memory media host. URLs are derived from the uploaded filename."""

    def __init__(self):
        self.uploads = []
        self.deleted = []
        self.fail_uploads = set()
        self.fail_deletes = set()
        self._lock = threading.Lock()

    def upload(self, file_obj):
        if file_obj.filename in self.fail_uploads:
            raise RuntimeError("upload rejected")

        stem, ext = file_obj.filename.rsplit(".", 1)
        url = f"https://media.test/upload/v1700000000/deals/{stem}.{ext}"

        with self._lock:
            self.uploads.append(url)

        return url

    def delete(self, identifier):
        if identifier in self.fail_deletes:
            raise RuntimeError("delete rejected")

        with self._lock:
            self.deleted.append(identifier)

        return 1


@pytest.fixture
def media_store() -> FakeMediaStore:
    return FakeMediaStore()


@pytest.fixture
def deal_config() -> DealConfig:
    return DealConfig(max_workers=2)


@pytest.fixture
def app(media_store, deal_config):
    app = create_app(
        overrides={"SQLALCHEMY_DATABASE_URI": "sqlite://", "TESTING": True},
        media_store=media_store,
        deal_config=deal_config,
    )

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def deal_form():
    """Minimal valid multipart form for add/update, overridable per test."""

    def build(**fields):
        form = {
            "dealName": "Summer Bundle",
            "dealDiscountValue": "20",
        }
        form.update(fields)
        return form

    return build


@pytest.fixture
def upload():
    """(stream, filename) tuple the Flask test client turns into a file part."""

    def build(filename: str):
        return (io.BytesIO(b"\x89PNG fake"), filename)

    return build


@pytest.fixture
def image_file():
    """werkzeug FileStorage, as handed to services by the request layer."""

    def build(filename: str) -> FileStorage:
        return FileStorage(stream=io.BytesIO(b"\x89PNG fake"), filename=filename, content_type="image/jpeg")

    return build


@pytest.fixture
def media_url():
    """URL the fake media store returns for an uploaded <stem>.jpg."""

    def build(stem: str) -> str:
        return f"https://media.test/upload/v1700000000/deals/{stem}.jpg"

    return build
