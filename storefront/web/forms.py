# storefront/web/forms.py
from typing import Any, Dict, Optional, Tuple
from fastapi import Request
from starlette.datastructures import UploadFile
from ..errors import ValidationError
from ..services import ImageUpload
from ..services.asset_store import too_large

CHUNK_SIZE = 64 * 1024
# room for the text fields sent next to the image
FORM_OVERHEAD = 1024 * 1024


async def read_image(upload: UploadFile, max_size: int) -> ImageUpload:
    """Read an uploaded file, stopping as soon as it exceeds max_size"""
    chunks = []
    size = 0
    while True:
        chunk = await upload.read(CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
        if size > max_size:
            raise too_large(max_size)
        chunks.append(chunk)
    return ImageUpload(
        filename=upload.filename or "",
        content_type=upload.content_type,
        content=b"".join(chunks)
    )


def check_content_length(request: Request, max_size: int):
    length = request.headers.get("content-length")
    if length and length.isdigit() and int(length) > max_size + FORM_OVERHEAD:
        raise too_large(max_size)


async def read_fields(request: Request, image_field: Optional[str] = None,
                      max_size: int = 0) -> Tuple[Dict[str, Any], Optional[ImageUpload]]:
    """Text fields plus the optional image from a form or JSON body"""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise ValidationError("Malformed JSON body")
        if not isinstance(body, dict):
            raise ValidationError("Expected a JSON object")
        return body, None

    if image_field:
        check_content_length(request, max_size)

    form = await request.form()
    fields: Dict[str, Any] = {}
    upload = None
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            # browsers send an empty part when no file was chosen
            if key == image_field and value.filename and upload is None:
                upload = await read_image(value, max_size)
            continue
        fields[key] = value
    return fields, upload
