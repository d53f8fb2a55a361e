# storefront/web/routes/products.py
from typing import Optional
from fastapi import APIRouter, Depends, Path, Request
from ...config import Config
from ...errors import ValidationError
from ...services import CatalogService
from ...utils.validators import MAX_ID
from ..dependencies import get_catalog
from ..forms import read_fields
from ..presenter import redirect, render, send_created, send_success, wants_html

router = APIRouter(prefix="/products", tags=["products"])


def _page_number(value: Optional[str]) -> int:
    try:
        return max(int(value), 1)
    except (TypeError, ValueError):
        return 1


@router.get("")
async def list_products(request: Request, search: Optional[str] = None,
                        page: Optional[str] = None, limit: Optional[str] = None,
                        catalog: CatalogService = Depends(get_catalog)):
    search = (search or "").strip()
    current_page = _page_number(page)

    if wants_html(request):
        result = await catalog.list_products(search, current_page, Config.PER_PAGE)
        return render(request, "products/index.html", {
            "products": result.items,
            "search": search,
            "current_page": result.page,
            "total_pages": result.total_pages,
            "total": result.total,
        })

    page_size = _page_number(limit) if limit else Config.API_PAGE_SIZE
    result = await catalog.list_products(search, current_page, page_size)
    return send_success({
        "products": result.items,
        "pagination": {
            "page": result.page,
            "limit": result.page_size,
            "total": result.total,
            "total_pages": result.total_pages,
        },
    })


@router.get("/create")
async def show_create_form(request: Request, catalog: CatalogService = Depends(get_catalog)):
    categories = await catalog.list_categories()
    return render(request, "products/create.html", {
        "categories": categories,
        "values": {},
        "errors": {},
    })


@router.get("/{product_id}/edit")
async def show_edit_form(request: Request, product_id: int = Path(..., ge=1, le=MAX_ID),
                         catalog: CatalogService = Depends(get_catalog)):
    product = await catalog.get_product(product_id)
    categories = await catalog.list_categories()
    return render(request, "products/edit.html", {
        "product": product,
        "categories": categories,
        "values": product.model_dump(),
        "errors": {},
    })


@router.get("/{product_id}")
async def get_product(request: Request, product_id: int = Path(..., ge=1, le=MAX_ID),
                      catalog: CatalogService = Depends(get_catalog)):
    product = await catalog.get_product(product_id)
    if wants_html(request):
        return render(request, "products/show.html", {"product": product})
    return send_success(product)


@router.post("")
async def create_product(request: Request, catalog: CatalogService = Depends(get_catalog)):
    fields, upload = await read_fields(request, "image", catalog.assets.max_size)
    try:
        product = await catalog.create_product(fields, upload)
    except ValidationError as e:
        if not wants_html(request) or not e.errors:
            raise
        categories = await catalog.list_categories()
        return render(request, "products/create.html", {
            "categories": categories,
            "values": fields,
            "errors": e.errors,
        }, status_code=400)

    if wants_html(request):
        return redirect("/products")
    return send_created(product, "Product created")


@router.put("/{product_id}")
async def update_product(request: Request, product_id: int = Path(..., ge=1, le=MAX_ID),
                         catalog: CatalogService = Depends(get_catalog)):
    fields, upload = await read_fields(request, "image", catalog.assets.max_size)
    try:
        product = await catalog.update_product(product_id, fields, upload)
    except ValidationError as e:
        if not wants_html(request) or not e.errors:
            raise
        existing = await catalog.get_product(product_id)
        categories = await catalog.list_categories()
        return render(request, "products/edit.html", {
            "product": existing,
            "categories": categories,
            "values": fields,
            "errors": e.errors,
        }, status_code=400)

    if wants_html(request):
        return redirect("/products")
    return send_success(product, "Product updated")


@router.delete("/{product_id}")
async def delete_product(request: Request, product_id: int = Path(..., ge=1, le=MAX_ID),
                         catalog: CatalogService = Depends(get_catalog)):
    await catalog.delete_product(product_id)
    if wants_html(request):
        return redirect("/products")
    return send_success(None, "Product deleted")
