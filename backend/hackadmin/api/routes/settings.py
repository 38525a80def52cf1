import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from pymongo import ReturnDocument

from hackadmin.api.deps import get_store
from hackadmin.core.response import APIError, build_success
from hackadmin.db.store import DocumentStore
from hackadmin.models import EventSettings
from hackadmin.schemas import SettingsUpdateRequest

router = APIRouter()
logger = logging.getLogger(__name__)


def load_settings(store: DocumentStore) -> dict:
    """The settings collection holds exactly one document; its absence is a server error."""
    settings_doc = store.settings.find_one()
    if not settings_doc:
        logger.error("❌ Settings document is missing")
        raise APIError(500, "Failed to retrieve settings document.")
    return settings_doc


@router.get("/get-settings")
def get_settings_document(store: DocumentStore = Depends(get_store)):
    try:
        current = EventSettings.from_doc(load_settings(store))
    except APIError:
        raise
    except Exception as e:
        logger.error(f"❌ Reading settings failed: {e}")
        raise APIError(500, "Failed to retrieve settings.", str(e))

    return build_success("Successfully retrieved settings document", current.to_json())


@router.patch("")
def update_settings(body: Optional[SettingsUpdateRequest] = None, store: DocumentStore = Depends(get_store)):
    """Update any of the three dates; omitted ones keep their stored value."""
    body = body or SettingsUpdateRequest()
    try:
        settings_doc = load_settings(store)
        current = EventSettings.from_doc(settings_doc)
        changes = {
            "registrationOpeningDate": body.registration_opening_date or current.registration_opening_date,
            "registrationClosingDate": body.registration_closing_date or current.registration_closing_date,
            "confirmationDate": body.confirmation_date or current.confirmation_date,
            "timestamp": datetime.now(timezone.utc),
        }
        updated = store.settings.find_one_and_update(
            {"_id": settings_doc["_id"]},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
    except APIError:
        raise
    except Exception as e:
        logger.error(f"❌ Updating settings failed: {e}")
        raise APIError(500, "Failed to update settings", str(e))

    if not updated:
        raise APIError(500, "Failed to update settings")

    logger.info("⚙️ Event settings updated")
    return build_success("Successfully updated settings", EventSettings.from_doc(updated).to_json())
