import logging
import math
import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo.errors import DuplicateKeyError

from hackadmin.api.deps import get_settings, get_store
from hackadmin.core.config import Settings
from hackadmin.core.deps import require_super_admin
from hackadmin.core.response import APIError, build_success, no_store
from hackadmin.core.security import PASSWORD_TOO_LONG, hash_password, password_too_long, verify_password
from hackadmin.db.store import DocumentStore
from hackadmin.models import Admin, parse_object_id
from hackadmin.schemas import AssignApplicationsRequest, ChangePasswordRequest, CreateAdminRequest
from hackadmin.services.assignment import (
    AdminNotFoundError,
    ApplicantNotFoundError,
    AssignmentService,
    NoReviewersError,
    REVIEWER_QUERY,
)

router = APIRouter()
logger = logging.getLogger(__name__)

ADMIN_NOT_FOUND = "Admin not found"


def find_admin(store: DocumentStore, admin_id: str) -> Optional[Admin]:
    oid = parse_object_id(admin_id)
    if oid is None:
        return None
    return Admin.from_doc(store.admins.find_one({"_id": oid}))


@router.delete("/delete-admin")
@router.delete("/delete-admin/")
@router.patch("/change-password")
@router.patch("/change-password/")
def admin_id_required():
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Admin ID is required")


# ==============================================================================
# 1. LIST ADMINS (With Search & Pagination)
# ==============================================================================
@router.get("")
def list_admins(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    search: Optional[str] = None,
    store: DocumentStore = Depends(get_store),
):
    """
    Reviewers (non super admins), paginated.
    Optional: ?search=jane matches first name, last name or email.
    """
    query = dict(REVIEWER_QUERY)
    if search:
        pattern = {"$regex": re.escape(search), "$options": "i"}
        query["$or"] = [{"firstName": pattern}, {"lastName": pattern}, {"email": pattern}]

    try:
        total_records = store.admins.count_documents(query)
        docs = store.admins.find(query).skip((page - 1) * page_size).limit(page_size)
        admins = [Admin.from_doc(doc).public() for doc in docs]
    except Exception as e:
        logger.error(f"❌ Listing admins failed: {e}")
        raise APIError(500, "Failed to fetch admins", str(e))

    return no_store(build_success("Admins found", {
        "data": admins,
        "pagination": {
            "page": page,
            "pageSize": page_size,
            "totalRecords": total_records,
            "totalPages": math.ceil(total_records / page_size),
        },
    }))


# ==============================================================================
# 2. CREATE / DELETE
# ==============================================================================
@router.post("/create-admin")
def create_admin(
    body: CreateAdminRequest,
    store: DocumentStore = Depends(get_store),
    config: Settings = Depends(get_settings),
):
    if not (body.first_name and body.last_name and body.email and body.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="firstName, lastName, email and password are required"
        )
    if password_too_long(body.password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PASSWORD_TOO_LONG)

    try:
        if store.admins.find_one({"email": body.email}):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="An admin with this email already exists"
            )

        admin = Admin(
            first_name=body.first_name,
            last_name=body.last_name,
            email=body.email,
            password=hash_password(body.password, rounds=config.BCRYPT_ROUNDS),
        )
        result = store.admins.insert_one(admin.to_doc())
        admin.id = str(result.inserted_id)
    except HTTPException:
        raise
    except DuplicateKeyError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="An admin with this email already exists")
    except Exception as e:
        logger.error(f"❌ Admin creation failed: {e}")
        raise APIError(500, "Failed to create admin", str(e))

    logger.info(f"✅ [Admin] Created admin {admin.email}")
    return build_success("Admin created successfully", admin.public())


@router.delete("/delete-admin/{admin_id}")
def delete_admin(admin_id: str, store: DocumentStore = Depends(get_store)):
    """Hard delete; returns the removed admin document without its password hash."""
    oid = parse_object_id(admin_id)
    try:
        deleted = store.admins.find_one_and_delete({"_id": oid}) if oid else None
    except Exception as e:
        logger.error(f"❌ Admin delete failed: {e}")
        raise APIError(500, "Failed to delete admin", str(e))

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ADMIN_NOT_FOUND)

    admin = Admin.from_doc(deleted)
    logger.info(f"🗑️ [Admin] Deleted admin {admin_id} ({admin.email})")
    return build_success("Admin deleted successfully", admin.public())


# ==============================================================================
# 3. CHANGE PASSWORD
# ==============================================================================
@router.patch("/change-password/{admin_id}")
def change_password(
    admin_id: str,
    body: ChangePasswordRequest,
    store: DocumentStore = Depends(get_store),
    config: Settings = Depends(get_settings),
):
    try:
        admin = find_admin(store, admin_id)
        if not admin:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ADMIN_NOT_FOUND)

        if not body.new_password:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="New password is required")

        if password_too_long(body.new_password):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PASSWORD_TOO_LONG)

        if verify_password(body.new_password, admin.password):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="New password cannot be the same as the old password"
            )

        admin.password = hash_password(body.new_password, rounds=config.BCRYPT_ROUNDS)
        store.admins.update_one({"_id": parse_object_id(admin.id)}, {"$set": {"password": admin.password}})
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Password update failed for {admin_id}: {e}")
        raise APIError(500, "Failed to update password", str(e))

    logger.info(f"🔑 [Admin] Password changed for {admin.email}")
    return build_success("Password updated successfully", admin.public())


# ==============================================================================
# 4. REVIEWER EMAILS
# ==============================================================================
@router.get("/get-emails")
def get_emails(store: DocumentStore = Depends(get_store)):
    try:
        emails = [
            doc["email"]
            for doc in store.admins.find(REVIEWER_QUERY, {"email": 1, "_id": 0})
            if doc.get("email")
        ]
    except Exception as e:
        logger.error(f"❌ Fetching admin emails failed: {e}")
        raise APIError(500, "Failed to fetch admins", str(e))

    # An empty reviewer list is reported as not found
    if not emails:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No admins were found")

    return no_store(build_success("Admins found", emails))


# ==============================================================================
# 5. APPLICATION ASSIGNMENT (super admins only)
# ==============================================================================
@router.post("/assign-applications", dependencies=[Depends(require_super_admin)])
def assign_applications(body: AssignApplicationsRequest, store: DocumentStore = Depends(get_store)):
    if not (body.selected_admin_email and body.selected_applicants):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Admin email or applicants list is not present in the body"
        )

    try:
        result = AssignmentService(store).assign(body.selected_admin_email, body.selected_applicants)
    except AdminNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ADMIN_NOT_FOUND)
    except ApplicantNotFoundError as e:
        raise APIError(404, "Applicant not found", str(e))
    except Exception as e:
        logger.error(f"❌ Assignment failed: {e}")
        raise APIError(500, "Failed to assign applications", str(e))

    return build_success("Applications successfully assigned", result)


@router.get("/auto-assign-applications", dependencies=[Depends(require_super_admin)])
def auto_assign_preview(store: DocumentStore = Depends(get_store)):
    try:
        stats = AssignmentService(store).unassigned_stats()
    except Exception as e:
        logger.error(f"❌ Auto-assign statistics failed: {e}")
        raise APIError(500, "Failed to fetch auto-assign statistics", str(e))

    return build_success("Auto-assign statistics retrieved", stats)


@router.post("/auto-assign-applications", dependencies=[Depends(require_super_admin)])
def auto_assign(store: DocumentStore = Depends(get_store)):
    try:
        result = AssignmentService(store).auto_assign()
    except NoReviewersError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"❌ Auto-assign failed: {e}")
        raise APIError(500, "Failed to auto-assign applications", str(e))

    if not result["totalAssigned"]:
        return build_success("No unassigned applications found", result)
    return build_success("Applications successfully auto-assigned", result)
