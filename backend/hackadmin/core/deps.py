from fastapi import Depends, HTTPException, Request, status

from hackadmin.api.deps import get_settings
from hackadmin.core.config import Settings
from hackadmin.core.security import TokenClaims, TokenInvalid, verify_session_token


def get_session_claims(request: Request, config: Settings = Depends(get_settings)) -> TokenClaims:
    """
    Reads the session cookie and verifies it.
    A missing, tampered or expired token raises 401 Unauthorized.
    """
    token = request.cookies.get(config.SESSION_COOKIE_NAME)
    result = verify_session_token(token, config)

    if isinstance(result, TokenInvalid):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return result


def require_super_admin(claims: TokenClaims = Depends(get_session_claims)) -> TokenClaims:
    if not claims.is_super_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: only super admins can do this",
        )
    return claims
