# storefront/web/presenter.py
"""Response shaping shared by the route modules.

Handlers call the catalog service without looking at headers; these helpers
decide between an HTML page (or redirect) and the JSON envelope
``{success, data?, message?, errors?}``.
"""
from typing import Any, Dict, Optional
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from ..config import Config
from ..utils.formatters import format_currency, format_date, format_datetime

templates = Jinja2Templates(directory=str(Config.TEMPLATE_DIR))
templates.env.globals.update(
    format_currency=format_currency,
    format_date=format_date,
    format_datetime=format_datetime,
)


def wants_html(request: Request) -> bool:
    """HTML only for clients that name it, JSON otherwise"""
    return "text/html" in request.headers.get("accept", "")


def send_success(data: Any = None, message: Optional[str] = None,
                 status_code: int = 200) -> JSONResponse:
    body: Dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    body["data"] = jsonable_encoder(data)
    return JSONResponse(body, status_code=status_code)


def send_created(data: Any, message: str = "Created successfully") -> JSONResponse:
    return send_success(data, message, status_code=201)


def send_error(message: str, status_code: int = 500,
               errors: Optional[Dict[str, str]] = None) -> JSONResponse:
    body: Dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return JSONResponse(body, status_code=status_code)


def render(request: Request, name: str, context: Optional[Dict[str, Any]] = None,
           status_code: int = 200):
    return templates.TemplateResponse(request, name, context or {}, status_code=status_code)


def redirect(url: str) -> RedirectResponse:
    # 303 so that a form POST (or overridden PUT/DELETE) lands on a GET
    return RedirectResponse(url, status_code=303)
