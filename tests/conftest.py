from datetime import datetime

import mongomock
import pytest
from fastapi.testclient import TestClient

from hackadmin.core.config import Settings
from hackadmin.core.security import create_session_token, hash_password
from hackadmin.db.store import DocumentStore
from hackadmin.main import create_app


@pytest.fixture
def config():
    return Settings(
        JWT_SECRET="test-secret",
        BCRYPT_ROUNDS=4,
        LOG_FILE=None,
        MONGODB_DB="hackadmin_test",
    )


@pytest.fixture
def store(config):
    store = DocumentStore(config.MONGODB_URI, config.MONGODB_DB, client_factory=mongomock.MongoClient)
    store.open()
    yield store
    store.close()


@pytest.fixture
def client(config, store):
    app = create_app(config=config, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_admin(store):
    def _make_admin(email="reviewer@conuhacks.io", password="hunter22", hashed=True, **overrides):
        doc = {
            "firstName": "Rita",
            "lastName": "Reviewer",
            "email": email,
            "password": hash_password(password, rounds=4) if hashed else password,
            "assignedApplications": [],
            "isSuperAdmin": False,
        }
        doc.update(overrides)
        doc["_id"] = store.admins.insert_one(doc).inserted_id
        return doc
    return _make_admin


@pytest.fixture
def sign_in(client, config):
    """Put a valid session cookie for the given admin document on the client."""
    def _sign_in(admin_doc):
        token = create_session_token(
            admin_id=str(admin_doc["_id"]),
            email=admin_doc["email"],
            is_super_admin=admin_doc.get("isSuperAdmin", False),
            config=config,
        )
        client.cookies.set(config.SESSION_COOKIE_NAME, token)
        return token
    return _sign_in


@pytest.fixture
def event_settings(store):
    doc = {
        "registrationOpeningDate": datetime(2026, 9, 1, 12, 0),
        "registrationClosingDate": datetime(2026, 11, 15, 23, 59),
        "confirmationDate": datetime(2026, 12, 1, 12, 0),
        "createdAt": datetime(2026, 8, 1),
        "timestamp": datetime(2026, 8, 1),
    }
    doc["_id"] = store.settings.insert_one(doc).inserted_id
    return doc
