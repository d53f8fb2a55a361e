# storefront/models/page.py
import math
from typing import List
from pydantic import BaseModel
from .product import Product

class ProductPage(BaseModel):
    """One page of a filtered product listing"""
    items: List[Product]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0
