"""
Portfolio CMS - FastAPI application
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging

from portfolio_api import __version__
from portfolio_api.core.config import Settings, settings as default_settings, validate_settings
from portfolio_api.core.database import Store
from portfolio_api.core.errors import AppError, ValidationError
from portfolio_api.core.rate_limit import FixedWindowLimiter
from portfolio_api.core.responses import failure
from portfolio_api.services.upload_service import LocalStorage

from portfolio_api.api.auth import router as auth_router
from portfolio_api.api.projects import router as projects_router
from portfolio_api.api.blog import router as blog_router
from portfolio_api.api.testimonials import router as testimonials_router
from portfolio_api.api.users import router as users_router
from portfolio_api.api.settings import router as settings_router
from portfolio_api.api.upload import router as upload_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEV_ALLOWED_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:8081",
    "http://localhost:8082",
    "http://localhost:8084",
    "http://localhost:3000",
    "http://localhost:5173",
]

SECURITY_HEADERS = {
    "Content-Security-Policy": "; ".join([
        "default-src 'self'",
        "style-src 'self' 'unsafe-inline'",
        "script-src 'self'",
        "img-src 'self' data: https:",
        "connect-src 'self'",
        "font-src 'self'",
        "object-src 'none'",
        "media-src 'self'",
        "frame-src 'none'",
    ]),
    "Cross-Origin-Resource-Policy": "cross-origin",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
}

# no CSP on the docs pages
DOC_PATHS = ("/docs", "/redoc")

ENDPOINTS = {
    "auth": "/api/auth",
    "projects": "/api/projects",
    "blog": "/api/blog",
    "testimonials": "/api/testimonials",
    "users": "/api/users",
    "settings": "/api/settings",
    "upload": "/api/upload",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store on startup, close it on shutdown"""
    store: Store = app.state.store
    logger.info("Initializing database...")
    await store.initialize()
    logger.info("Portfolio API started (%s)", app.state.settings.ENVIRONMENT)

    yield

    await store.close()
    logger.info("Portfolio API stopped")


def _error_details(exc: RequestValidationError) -> list:
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({"field": ".".join(loc), "message": err.get("msg", "")})
    return details


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        details = exc.details if isinstance(exc, ValidationError) else None
        return failure(exc.message, exc.status_code, details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return failure("Validation failed", 400, _error_details(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return failure(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return failure("Internal server error", 500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around one settings object"""
    settings = settings or default_settings
    validate_settings(settings)

    app = FastAPI(
        title="Portfolio API",
        description="Content management API for a personal portfolio site",
        version=__version__,
        docs_url="/docs" if settings.ENVIRONMENT == "development" else None,
        redoc_url="/redoc" if settings.ENVIRONMENT == "development" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = Store(settings)
    app.state.storage = LocalStorage(settings.UPLOAD_PATH, settings.MAX_FILE_SIZE)
    app.state.limiter = FixedWindowLimiter(settings.RATE_LIMIT_MAX, settings.RATE_LIMIT_WINDOW * 60)

    register_exception_handlers(app)

    @app.middleware("http")
    async def rate_limit(request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        allowed, remaining = await app.state.limiter.check(client_ip)
        if not allowed:
            logger.warning("Rate limit exceeded for %s", client_ip)
            return failure("Too many requests from this IP, please try again later.", 429)
        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(settings.RATE_LIMIT_MAX)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        return response

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            if name == "Content-Security-Policy" and request.url.path.startswith(DOC_PATHS):
                continue
            response.headers.setdefault(name, value)
        return response

    origins = list(DEV_ALLOWED_ORIGINS)
    if settings.FRONTEND_URL and settings.FRONTEND_URL not in origins:
        origins.append(settings.FRONTEND_URL)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With", "Accept", "Origin"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1024)

    app.mount("/uploads", StaticFiles(directory=app.state.storage.base_dir), name="uploads")

    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(projects_router, prefix="/api/projects", tags=["projects"])
    app.include_router(blog_router, prefix="/api/blog", tags=["blog"])
    app.include_router(testimonials_router, prefix="/api/testimonials", tags=["testimonials"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(settings_router, prefix="/api/settings", tags=["settings"])
    app.include_router(upload_router, prefix="/api/upload", tags=["upload"])

    @app.get("/health")
    async def health_check():
        """Liveness probe"""
        return {
            "success": True,
            "message": "Portfolio API Server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": settings.ENVIRONMENT,
            "version": __version__,
        }

    @app.get("/api")
    async def api_index():
        """Endpoint directory"""
        return {
            "success": True,
            "message": f"Portfolio API v{__version__}",
            "endpoints": ENDPOINTS,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("portfolio_api.main:app", host="0.0.0.0", port=default_settings.PORT, reload=default_settings.DEBUG)
