# storefront/web/dependencies.py
from fastapi import Request
from ..services import CatalogService


def get_catalog(request: Request) -> CatalogService:
    return request.app.state.catalog
