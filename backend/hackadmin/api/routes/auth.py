import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from hackadmin.api.deps import get_settings, get_store
from hackadmin.core.config import Settings
from hackadmin.core.deps import get_session_claims
from hackadmin.core.response import APIError, build_success
from hackadmin.core.security import (
    PASSWORD_TOO_LONG,
    TokenClaims,
    create_session_token,
    hash_password,
    is_password_hash,
    password_too_long,
    verify_password,
)
from hackadmin.db.store import DocumentStore
from hackadmin.models import Admin, parse_object_id
from hackadmin.schemas import LoginRequest

router = APIRouter()
logger = logging.getLogger(__name__)


def set_session_cookie(response: Response, token: str, config: Settings, max_age=None):
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=config.is_production,
        samesite="lax",
        max_age=max_age,
        path="/"
    )


@router.post("/login")
def login(
    login_data: LoginRequest,
    store: DocumentStore = Depends(get_store),
    config: Settings = Depends(get_settings),
):
    if not login_data.email or not login_data.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email or password missing")
    if password_too_long(login_data.password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PASSWORD_TOO_LONG)

    try:
        admin = Admin.from_doc(store.admins.find_one({"email": login_data.email}))
        if not admin or not verify_password(login_data.password, admin.password):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        # Accounts from before hashing still hold plaintext; upgrade on first login
        if not is_password_hash(admin.password):
            store.admins.update_one(
                {"_id": parse_object_id(admin.id)},
                {"$set": {"password": hash_password(login_data.password, rounds=config.BCRYPT_ROUNDS)}},
            )
            logger.info(f"🔑 Upgraded legacy password for {admin.email}")

        token = create_session_token(
            admin_id=admin.id,
            email=admin.email,
            is_super_admin=admin.is_super_admin,
            remember=bool(login_data.remember),
            config=config,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Login failed: {e}")
        raise APIError(500, "Login failed", str(e))

    response = build_success("Logged in successfully", {"ok": True})
    max_age = config.SESSION_MAX_AGE_SECONDS if login_data.remember else None
    set_session_cookie(response, token, config, max_age=max_age)
    logger.info(f"✅ Admin {admin.email} logged in")
    return response


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(config: Settings = Depends(get_settings)):
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    set_session_cookie(response, "", config, max_age=0)
    return response


@router.get("/me")
def get_current_admin_info(
    claims: TokenClaims = Depends(get_session_claims),
    store: DocumentStore = Depends(get_store),
):
    """Get the signed-in admin's profile"""
    oid = parse_object_id(claims.admin_id)
    try:
        admin = Admin.from_doc(store.admins.find_one({"_id": oid})) if oid else None
    except Exception as e:
        logger.error(f"❌ Fetching current admin failed: {e}")
        raise APIError(500, "Failed to fetch current admin", str(e))

    if not admin:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Admin not found")

    return build_success("Current admin", admin.profile())
