import mongomock
import pytest

from rest_framework.test import APIClient

from modules.core import store as store_module
from modules.core.store import DocumentStore


@pytest.fixture()
def mongo_db():
    """An empty in-memory MongoDB database."""
    return mongomock.MongoClient()["shop_test"]


@pytest.fixture(autouse=True)
def document_store(mongo_db, monkeypatch):
    """Point the application at the in-memory database for every test."""
    store = DocumentStore(mongo_db)
    monkeypatch.setattr(store_module, "_store", store)
    return store


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
