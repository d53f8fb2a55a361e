# storefront/models/product.py
from decimal import Decimal
from typing import List, Optional
from pydantic import field_serializer
from .base import TimeStampedModel
from .category import Category

class Product(TimeStampedModel):
    """A catalog item belonging to exactly one category"""
    id: int
    category_id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    stock: int = 0
    image: Optional[str] = None

    # Joined from categories when loaded through the repository
    category: Optional[Category] = None

    @field_serializer('price')
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class CategoryDetail(Category):
    """Category together with the products filed under it"""
    products: List[Product] = []
