# storefront/web/app.py
import logging
from contextlib import asynccontextmanager
from typing import Optional
from urllib.parse import parse_qs
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from ..database import Database
from ..errors import Internal, StorefrontError
from ..repositories import CategoryRepository, ProductRepository
from ..services import AssetStore, CatalogService
from .presenter import redirect, render, send_error, wants_html
from .routes import api, categories, products

logger = logging.getLogger(__name__)


class MethodOverrideMiddleware:
    """Turn ``POST ...?_method=PUT`` from an HTML form into a real PUT"""

    ALLOWED = {"PUT", "PATCH", "DELETE"}

    def __init__(self, app, param: str = "_method"):
        self.app = app
        self.param = param

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            override = query.get(self.param, [""])[0].upper()
            if override in self.ALLOWED:
                scope = dict(scope, method=override)
        await self.app(scope, receive, send)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = None
    if app.state.catalog is None:
        db = Database()
        await db.connect()
        app.state.catalog = CatalogService(
            CategoryRepository(db),
            ProductRepository(db),
            app.state.assets
        )
    try:
        yield
    finally:
        if db is not None:
            await db.close()


def _error_response(request: Request, status_code: int, message: str, errors=None):
    if wants_html(request):
        return render(request, "error.html", {
            "status_code": status_code,
            "message": message,
            "errors": errors or {},
        }, status_code=status_code)
    return send_error(message, status_code, errors)


async def storefront_error_handler(request: Request, exc: StorefrontError):
    if exc.retryable:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path}: {exc.status_code} {exc.message}")
    return _error_response(request, exc.status_code, exc.message, exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = {
        str(error["loc"][-1]): error["msg"]
        for error in exc.errors()
        if error.get("loc")
    }
    return _error_response(request, 400, "Validation failed", errors)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return _error_response(request, exc.status_code, message)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    error = Internal()
    return _error_response(request, error.status_code, error.message)


def create_app(catalog: Optional[CatalogService] = None) -> FastAPI:
    """Build the web app; without a catalog one is wired up at startup"""
    app = FastAPI(title="storefront", lifespan=lifespan)
    app.state.catalog = catalog
    app.state.assets = catalog.assets if catalog is not None else AssetStore()

    app.add_middleware(MethodOverrideMiddleware)

    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    @app.get("/", include_in_schema=False)
    async def index():
        return redirect("/products")

    app.include_router(products.router)
    app.include_router(categories.router)
    app.include_router(api.router)

    app.mount(
        "/uploads",
        StaticFiles(directory=str(app.state.assets.upload_path)),
        name="uploads"
    )
    return app
