from fastapi import APIRouter, Depends
from hackadmin.api.deps import get_store
from hackadmin.db.store import DocumentStore
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health_check(store: DocumentStore = Depends(get_store)):
    """Health check endpoint"""
    try:
        store.ping()

        return {
            "status": "healthy",
            "database": "connected",
            "service": "hackadmin"
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return {
            "status": "unhealthy",
            "error": str(e)
        }
