# storefront/models/category.py
from typing import Optional
from .base import TimeStampedModel

class Category(TimeStampedModel):
    """A named grouping of products"""
    id: int
    name: str
    description: Optional[str] = None

    # Not stored in DB, populated when needed
    product_count: int = 0
