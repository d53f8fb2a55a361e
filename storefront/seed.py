# storefront/seed.py
"""Reset the catalog to the sample categories and products.

Run with ``python -m storefront.seed``. Products are created without images.
"""
import asyncio
import logging
from .config import setup_logging
from .database import Database
from .repositories import CategoryRepository, ProductRepository
from .services import AssetStore, CatalogService

logger = logging.getLogger(__name__)

CATEGORIES = [
    {'name': 'Electronics', 'description': 'Electronic devices and gadgets'},
    {'name': 'Fashion', 'description': 'Clothing and accessories'},
    {'name': 'Sports', 'description': 'Sports equipment and accessories'},
    {'name': 'Books', 'description': 'Books and publications'},
    {'name': 'Food & Beverage', 'description': 'Food and drink products'},
]

# (name, description, price, stock, category name)
PRODUCTS = [
    ('Laptop Gaming ROG', 'ASUS ROG Strix G15 - High performance gaming laptop with RTX 4060', 15500000, 15, 'Electronics'),
    ('iPhone 15 Pro Max', 'Apple iPhone 15 Pro Max 256GB - Titanium Blue', 22999000, 8, 'Electronics'),
    ('Apple Watch Ultra 2', 'Apple Watch Ultra 2 - 49mm Titanium Case', 13499000, 5, 'Electronics'),
    ('Samsung Galaxy S24 Ultra', 'Samsung Galaxy S24 Ultra 512GB - Titanium Gray', 18999000, 12, 'Electronics'),
    ('MacBook Pro M3', 'MacBook Pro 14" M3 Pro Chip 18GB RAM 512GB SSD', 32999000, 6, 'Electronics'),
    ('Sony WH-1000XM5', 'Sony WH-1000XM5 Wireless Noise Cancelling Headphones - Black', 5499000, 18, 'Electronics'),
    ('Canon EOS R6', 'Canon EOS R6 Mirrorless Camera Body', 38999000, 4, 'Electronics'),
    ('Nike Air Jordan 1', 'Nike Air Jordan 1 Retro High OG - Chicago', 2499000, 25, 'Sports'),
    ('Adidas Ultraboost', 'Adidas Ultraboost Light Running Shoes', 2799000, 30, 'Sports'),
    ('Wilson Basketball', 'Wilson Evolution Indoor Basketball - Official Size 7', 450000, 50, 'Sports'),
    ('Zara Denim Jacket', 'Zara Classic Denim Jacket - Blue Wash', 899000, 20, 'Fashion'),
    ('H&M Cotton T-Shirt', 'H&M Regular Fit Cotton T-Shirt - White', 199000, 100, 'Fashion'),
    ('Filosofi Teras', 'Buku Filosofi Teras - Henry Manampiring', 98000, 40, 'Books'),
    ('Cantik Itu Luka', 'Novel Cantik Itu Luka - Eka Kurniawan', 115000, 35, 'Books'),
    ('Starbucks Coffee Beans', 'Starbucks Pike Place Roast Whole Bean Coffee 250g', 185000, 60, 'Food & Beverage'),
    ('iPad Pro M2', 'iPad Pro 11" M2 Chip WiFi 128GB - Space Gray', 16999000, 10, 'Electronics'),
    ('AirPods Pro 2', 'Apple AirPods Pro (2nd Generation) with MagSafe Case', 3799000, 22, 'Electronics'),
    ('Puma RS-X', 'Puma RS-X Reinvention Sneakers', 1899000, 35, 'Sports'),
    ('Uniqlo Hoodie', 'Uniqlo Sweat Pullover Hoodie - Navy', 399000, 80, 'Fashion'),
    ('Laut Bercerita', 'Novel Laut Bercerita - Leila S. Chudori', 105000, 45, 'Books'),
]


async def clear_catalog(catalog: CatalogService):
    for product in await catalog.list_all_products():
        await catalog.delete_product(product.id)
    for category in await catalog.list_categories():
        await catalog.delete_category(category.id)


async def seed_catalog(catalog: CatalogService):
    """Replace the whole catalog with the sample data"""
    await clear_catalog(catalog)

    category_ids = {}
    for data in CATEGORIES:
        category = await catalog.create_category(data)
        category_ids[category.name] = category.id
    logger.info(f"Created {len(category_ids)} categories")

    for name, description, price, stock, category_name in PRODUCTS:
        await catalog.create_product({
            'name': name,
            'description': description,
            'price': price,
            'stock': stock,
            'category_id': category_ids[category_name],
        })
    logger.info(f"Created {len(PRODUCTS)} products in {len(category_ids)} categories")


async def main():
    setup_logging()
    db = Database()
    await db.connect()
    try:
        catalog = CatalogService(CategoryRepository(db), ProductRepository(db), AssetStore())
        await seed_catalog(catalog)
    finally:
        await db.close()


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
