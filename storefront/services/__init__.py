# storefront/services/__init__.py
from .asset_store import AssetStore
from .catalog_service import CatalogService, ImageUpload

__all__ = ['AssetStore', 'CatalogService', 'ImageUpload']
