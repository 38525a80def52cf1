from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from hackadmin.api.routes import admin, admin_info, auth, health, lookups, portal, settings as settings_routes, stats
from hackadmin.core.config import Settings, settings
from hackadmin.core.logging import setup_logging
from hackadmin.core.middleware import AuthGateMiddleware
from hackadmin.core.response import build_error
from hackadmin.db.store import DocumentStore

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Build the application around a settings object and a document store."""
    config = config or settings
    store = store or DocumentStore(config.MONGODB_URI, config.MONGODB_DB)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan events for startup and shutdown"""
        setup_logging(config.LOG_LEVEL, config.LOG_FILE)
        logger.info(f"🚀 Starting {config.PROJECT_NAME} ({config.ENVIRONMENT})...")
        config.validate_secrets()

        store.open()
        try:
            store.ping()
            store.ensure_indexes()
            logger.info("✅ Database connection successful")
        except Exception as e:
            logger.error(f"❌ Database connection failed: {e}")
            store.close()
            raise

        yield

        logger.info("👋 Shutting down...")
        store.close()

    app = FastAPI(
        title=config.PROJECT_NAME,
        description="Back office for hackathon registration: admins, reviews and event settings",
        version=config.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = config
    app.state.store = store

    app.add_middleware(AuthGateMiddleware, config=config)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return build_error(
            str(exc.detail),
            getattr(exc, "error", None),
            exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(error.get("loc", [])), "msg": error.get("msg"), "type": error.get("type")}
            for error in exc.errors()
        ]
        return build_error("Invalid request body", errors, 400)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(admin.router, prefix="/admin", tags=["Admins"])
    app.include_router(auth.router, prefix="/auth-token", tags=["Session"])
    app.include_router(admin_info.router, prefix="/get-adminInfo", tags=["Admins"])
    app.include_router(settings_routes.router, prefix="/settings", tags=["Settings"])
    app.include_router(stats.router, prefix="/stats", tags=["Statistics"])
    app.include_router(lookups.router, prefix="/lookups", tags=["Lookups"])
    app.include_router(portal.router, tags=["Pages"], include_in_schema=False)

    @app.get("/")
    async def root():
        """Root endpoint with API information"""
        return {
            "service": config.PROJECT_NAME,
            "version": config.VERSION,
            "status": "operational",
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "admins": "/admin",
                "session": "/auth-token/me",
                "settings": "/settings/get-settings",
                "stats": "/stats",
                "lookups": "/lookups",
                "dashboard": "/dashboard",
            },
        }

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)
