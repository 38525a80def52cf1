import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from hackadmin.core.config import Settings
from hackadmin.core.security import TokenClaims, verify_session_token

logger = logging.getLogger(__name__)


def resolve_redirect(path: str, is_authenticated: bool, config: Settings) -> Optional[str]:
    """Where a page request should be sent instead, or None to let it through."""
    if not is_authenticated and path.startswith(config.PROTECTED_PREFIX):
        return config.LOGIN_PATH
    if is_authenticated and path.startswith(config.AUTH_PREFIX):
        return config.PROTECTED_PREFIX
    return None


class AuthGateMiddleware(BaseHTTPMiddleware):
    """Keeps signed-out visitors off the dashboard and signed-in admins off the login pages."""

    def __init__(self, app, config: Settings):
        super().__init__(app)
        self.config = config

    async def dispatch(self, request: Request, call_next):
        token = request.cookies.get(self.config.SESSION_COOKIE_NAME)
        is_authenticated = isinstance(verify_session_token(token, self.config), TokenClaims)

        target = resolve_redirect(request.url.path, is_authenticated, self.config)
        if target:
            logger.debug(f"Redirecting {request.url.path} -> {target}")
            return RedirectResponse(url=target, status_code=307)

        return await call_next(request)
