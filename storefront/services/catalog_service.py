# storefront/services/catalog_service.py
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional
from ..errors import ValidationError
from ..models import Category, CategoryDetail, Product, ProductPage
from ..utils.validators import (
    category_fields,
    product_fields,
    validate_category,
    validate_product,
)


@dataclass
class ImageUpload:
    """A single uploaded image as received from the form"""
    filename: str
    content_type: Optional[str]
    content: bytes


class CatalogService:
    """Coordinates product rows with their image files.

    A product and its image change together from the caller's point of view:
    an image staged for a request that fails is removed again, and a replaced
    image is only removed once the row pointing at its successor is stored.
    The filesystem is not part of the database transaction, so the cleanup
    steps are best effort.
    """

    def __init__(self, categories, products, assets):
        self.categories = categories
        self.products = products
        self.assets = assets
        self.logger = logging.getLogger(__name__)

    # Categories

    async def list_categories(self) -> List[Category]:
        return await self.categories.list()

    async def get_category(self, category_id: int) -> Category:
        return await self.categories.get(category_id)

    async def get_category_detail(self, category_id: int) -> CategoryDetail:
        return await self.categories.get_detail(category_id)

    async def create_category(self, data: Mapping[str, Any]) -> Category:
        result = validate_category(data)
        if not result.valid:
            raise ValidationError(errors=result.errors)
        fields = category_fields(data)
        return await self.categories.create(fields['name'], fields['description'])

    async def update_category(self, category_id: int, data: Mapping[str, Any]) -> Category:
        result = validate_category(data)
        if not result.valid:
            raise ValidationError(errors=result.errors)
        fields = category_fields(data)
        return await self.categories.update(category_id, fields['name'], fields['description'])

    async def delete_category(self, category_id: int):
        await self.categories.delete(category_id)

    # Products

    async def list_products(self, search: Optional[str] = None, page: int = 1,
                            page_size: Optional[int] = None) -> ProductPage:
        return await self.products.list(search=search or None, page=page, page_size=page_size)

    async def list_all_products(self) -> List[Product]:
        return await self.products.list_all()

    async def get_product(self, product_id: int) -> Product:
        return await self.products.get(product_id)

    async def create_product(self, data: Mapping[str, Any],
                             upload: Optional[ImageUpload] = None) -> Product:
        staged = await self._stage(upload)
        try:
            result = validate_product(data)
            if not result.valid:
                raise ValidationError(errors=result.errors)

            fields = product_fields(data)
            fields['image'] = staged
            product = await self.products.create(fields)
        except Exception:
            await self._discard(staged)
            raise

        self.logger.info(f"Product {product.id} created")
        return product

    async def update_product(self, product_id: int, data: Mapping[str, Any],
                             upload: Optional[ImageUpload] = None) -> Product:
        staged = await self._stage(upload)
        try:
            existing = await self.products.get(product_id)

            result = validate_product(data)
            if not result.valid:
                raise ValidationError(errors=result.errors)

            fields = product_fields(data)
            if staged:
                fields['image'] = staged
            product = await self.products.update(product_id, fields)
        except Exception:
            await self._discard(staged)
            raise

        # the row now points at the new file
        if staged and existing.image and existing.image != staged:
            await self._discard(existing.image)

        self.logger.info(f"Product {product_id} updated")
        return product

    async def delete_product(self, product_id: int):
        product = await self.products.get(product_id)
        await self.products.delete(product_id)

        if product.image:
            await self._discard(product.image)

        self.logger.info(f"Product {product_id} deleted")

    async def _stage(self, upload: Optional[ImageUpload]) -> Optional[str]:
        if upload is None:
            return None
        return await self.assets.save(upload.content, upload.filename, upload.content_type)

    async def _discard(self, filename: Optional[str]):
        """Remove a file without failing the surrounding operation"""
        if not filename:
            return
        try:
            await self.assets.delete(filename)
        except Exception:
            self.logger.warning(f"Could not remove asset {filename}", exc_info=True)
