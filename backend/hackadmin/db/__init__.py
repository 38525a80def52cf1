from hackadmin.db.store import DocumentStore, StoreNotOpenError

__all__ = ["DocumentStore", "StoreNotOpenError"]
