# storefront/web/routes/categories.py
from fastapi import APIRouter, Depends, Path, Request
from ...errors import ValidationError
from ...services import CatalogService
from ...utils.validators import MAX_ID
from ..dependencies import get_catalog
from ..forms import read_fields
from ..presenter import redirect, render, send_created, send_success, wants_html

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("")
async def list_categories(request: Request, catalog: CatalogService = Depends(get_catalog)):
    categories = await catalog.list_categories()
    if wants_html(request):
        return render(request, "categories/index.html", {"categories": categories})
    return send_success(categories)


@router.get("/create")
async def show_create_form(request: Request):
    return render(request, "categories/create.html", {"values": {}, "errors": {}})


@router.get("/{category_id}/edit")
async def show_edit_form(request: Request, category_id: int = Path(..., ge=1, le=MAX_ID),
                         catalog: CatalogService = Depends(get_catalog)):
    category = await catalog.get_category(category_id)
    return render(request, "categories/edit.html", {
        "category": category,
        "values": category.model_dump(),
        "errors": {},
    })


@router.get("/{category_id}")
async def get_category(request: Request, category_id: int = Path(..., ge=1, le=MAX_ID),
                       catalog: CatalogService = Depends(get_catalog)):
    category = await catalog.get_category_detail(category_id)
    if wants_html(request):
        return render(request, "categories/show.html", {"category": category})
    return send_success(category)


@router.post("")
async def create_category(request: Request, catalog: CatalogService = Depends(get_catalog)):
    fields, _ = await read_fields(request)
    try:
        category = await catalog.create_category(fields)
    except ValidationError as e:
        if not wants_html(request) or not e.errors:
            raise
        return render(request, "categories/create.html", {
            "values": fields,
            "errors": e.errors,
        }, status_code=400)

    if wants_html(request):
        return redirect("/categories")
    return send_created(category, "Category created")


@router.put("/{category_id}")
async def update_category(request: Request, category_id: int = Path(..., ge=1, le=MAX_ID),
                          catalog: CatalogService = Depends(get_catalog)):
    fields, _ = await read_fields(request)
    try:
        category = await catalog.update_category(category_id, fields)
    except ValidationError as e:
        if not wants_html(request) or not e.errors:
            raise
        existing = await catalog.get_category(category_id)
        return render(request, "categories/edit.html", {
            "category": existing,
            "values": fields,
            "errors": e.errors,
        }, status_code=400)

    if wants_html(request):
        return redirect("/categories")
    return send_success(category, "Category updated")


@router.delete("/{category_id}")
async def delete_category(request: Request, category_id: int = Path(..., ge=1, le=MAX_ID),
                          catalog: CatalogService = Depends(get_catalog)):
    await catalog.delete_category(category_id)
    if wants_html(request):
        return redirect("/categories")
    return send_success(None, "Category deleted")
