# storefront/web/routes/api.py
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from ...services import CatalogService
from ..dependencies import get_catalog

router = APIRouter(prefix="/api", tags=["api"])


# Plain unpaginated dumps, no envelope


@router.get("/products")
async def api_products(catalog: CatalogService = Depends(get_catalog)):
    products = await catalog.list_all_products()
    return JSONResponse(jsonable_encoder(products))


@router.get("/categories")
async def api_categories(catalog: CatalogService = Depends(get_catalog)):
    categories = await catalog.list_categories()
    return JSONResponse(jsonable_encoder(categories))
