import logging

from fastapi import APIRouter, Depends

from hackadmin.api.deps import get_store
from hackadmin.core.response import APIError, build_success, no_store
from hackadmin.db.store import DocumentStore
from hackadmin.services.stats import StatsService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
def get_stats(store: DocumentStore = Depends(get_store)):
    """Dashboard numbers computed from applications, teams and users."""
    try:
        stats = StatsService(store).dashboard()
    except Exception as e:
        logger.error(f"❌ Computing statistics failed: {e}")
        raise APIError(500, "Failed to retrieve applicant statistics", str(e))

    return no_store(build_success("Applicant statistics retrieved successfully", stats))
