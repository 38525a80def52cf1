import logging

from fastapi import APIRouter, Depends, HTTPException, status

from hackadmin.api.deps import get_store
from hackadmin.core.response import APIError, build_success
from hackadmin.db.store import DocumentStore
from hackadmin.models import Admin, parse_object_id

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
@router.get("/")
def admin_id_required():
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="AdminId is not defined")


@router.get("/{admin_id}")
def get_admin_info(admin_id: str, store: DocumentStore = Depends(get_store)):
    """The stored admin document, minus the password hash which never leaves the service."""
    oid = parse_object_id(admin_id)
    try:
        admin = Admin.from_doc(store.admins.find_one({"_id": oid})) if oid else None
    except Exception as e:
        logger.error(f"❌ Admin lookup failed for {admin_id}: {e}")
        raise APIError(500, "Failed to retrieve admin information", str(e))

    if not admin:
        logger.info(f"No admin was found with id {admin_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No admin was found with the provided id.")

    return build_success("Admin found", admin.public())
