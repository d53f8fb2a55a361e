# storefront/models/__init__.py
from .category import Category
from .product import Product, CategoryDetail
from .page import ProductPage

__all__ = ['Category', 'CategoryDetail', 'Product', 'ProductPage']
