import logging
from typing import Callable, Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger(__name__)

# Unique indexes per collection: (collection, field, sparse)
UNIQUE_INDEXES = [
    ("admins", "email", False),
    ("users", "email", False),
    ("users", "verificationToken", True),
    ("users", "resetPasswordToken", True),
    ("teams", "teamName", False),
    ("teams", "teamCode", False),
    ("teams", "teamOwner", False),
    ("checkins", "email", False),
    ("meals", "email", False),
    ("applications", "email", False),
]


class StoreNotOpenError(RuntimeError):
    pass


class DocumentStore:
    """Handle on the MongoDB database.

    Created once by the application entry point, opened in the lifespan and
    handed to route handlers through the `get_store` dependency.
    """

    def __init__(self, uri: str, db_name: str, client_factory: Callable[..., MongoClient] = MongoClient):
        self.uri = uri
        self.db_name = db_name
        self._client_factory = client_factory
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def open(self) -> "DocumentStore":
        if self.is_open:
            logger.debug("Store already open")
            return self

        self._client = self._client_factory(self.uri)
        self._db = self._client[self.db_name]
        logger.info(f"📦 Opened document store '{self.db_name}'")
        return self

    def close(self):
        if not self.is_open:
            return
        self._client.close()
        self._client = None
        self._db = None
        logger.info("👋 Closed document store")

    def ping(self):
        """Round trip to the server. Raises on failure."""
        self._require_open()
        self._client.admin.command("ping")

    def ensure_indexes(self):
        for collection_name, field, sparse in UNIQUE_INDEXES:
            self.collection(collection_name).create_index(
                [(field, ASCENDING)],
                unique=True,
                sparse=sparse,
            )
        logger.info(f"✅ Ensured {len(UNIQUE_INDEXES)} unique indexes")

    def _require_open(self):
        if not self.is_open:
            raise StoreNotOpenError("Document store is not open")

    def collection(self, name: str) -> Collection:
        self._require_open()
        return self._db[name]

    # Collections
    @property
    def admins(self) -> Collection:
        return self.collection("admins")

    @property
    def users(self) -> Collection:
        return self.collection("users")

    @property
    def teams(self) -> Collection:
        return self.collection("teams")

    @property
    def settings(self) -> Collection:
        return self.collection("settings")

    @property
    def applications(self) -> Collection:
        return self.collection("applications")

    @property
    def checkins(self) -> Collection:
        return self.collection("checkins")

    @property
    def meals(self) -> Collection:
        return self.collection("meals")

    @property
    def qr_code_mappings(self) -> Collection:
        return self.collection("qrcodemappings")
