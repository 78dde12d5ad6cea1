"""
Content lookups used by the generation pipeline: stock photos and the
product catalog.
"""

from kitchen_cursor.infrastructure.catalog.stock_photos import StockPhotoService
from kitchen_cursor.infrastructure.catalog.product_catalog import CatalogProduct, ProductCatalog

__all__ = ['StockPhotoService', 'CatalogProduct', 'ProductCatalog']
