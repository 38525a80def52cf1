from fastapi import Request

from hackadmin.core.config import Settings
from hackadmin.db.store import DocumentStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> DocumentStore:
    """Dependency for getting the document store.

    The lifespan opens the store; open() is a no-op once connected.
    """
    store: DocumentStore = request.app.state.store
    return store.open()
