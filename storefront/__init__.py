"""Product catalog admin: categories, products and product images."""

__version__ = "1.0.0"
