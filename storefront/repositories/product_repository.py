# storefront/repositories/product_repository.py
import logging
from typing import Any, Dict, List, Mapping, Optional
from ..config import Config
from ..errors import NotFound
from ..models import Category, Product, ProductPage

logger = logging.getLogger(__name__)

PRODUCT_SELECT = """
    SELECT p.id, p.name, p.description, p.price, p.stock, p.image,
           p.category_id, p.created_at,
           c.name AS category_name,
           c.description AS category_description,
           c.created_at AS category_created_at
    FROM products p
    JOIN categories c ON c.id = p.category_id
"""

# search matches name OR description; NULL disables the filter
_SEARCH_FILTER = """
    WHERE ($1::text IS NULL
           OR p.name LIKE $1 ESCAPE '\\'
           OR p.description LIKE $1 ESCAPE '\\')
"""

_COLUMNS = ('name', 'description', 'price', 'stock', 'image', 'category_id')


def product_from_row(row: Mapping[str, Any]) -> Product:
    data = dict(row)
    category = Category(
        id=data['category_id'],
        name=data.pop('category_name'),
        description=data.pop('category_description'),
        created_at=data.pop('category_created_at'),
    )
    return Product(**data, category=category)


def like_pattern(search: Optional[str]) -> Optional[str]:
    """Substring LIKE pattern with the wildcards in `search` escaped"""
    if not search:
        return None
    escaped = search.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f"%{escaped}%"


class ProductRepository:
    """Product rows joined with their category"""

    def __init__(self, db):
        self.db = db

    async def list(self, search: Optional[str] = None, page: int = 1,
                   page_size: Optional[int] = None) -> ProductPage:
        page = max(page, 1)
        page_size = page_size or Config.PER_PAGE
        skip = (page - 1) * page_size
        pattern = like_pattern(search)

        async with self.db.connection() as conn:
            total = await conn.fetchval(
                "SELECT COUNT(*) FROM products p" + _SEARCH_FILTER,
                pattern
            )
            rows = await conn.fetch(PRODUCT_SELECT + _SEARCH_FILTER + """
                ORDER BY p.created_at DESC, p.id DESC
                LIMIT $2 OFFSET $3
            """, pattern, page_size, skip)

        return ProductPage(
            items=[product_from_row(row) for row in rows],
            total=total,
            page=page,
            page_size=page_size
        )

    async def list_all(self) -> List[Product]:
        async with self.db.connection() as conn:
            rows = await conn.fetch(PRODUCT_SELECT + """
                ORDER BY p.created_at DESC, p.id DESC
            """)
            return [product_from_row(row) for row in rows]

    async def get(self, product_id: int) -> Product:
        async with self.db.connection() as conn:
            row = await conn.fetchrow(PRODUCT_SELECT + """
                WHERE p.id = $1
            """, product_id)
        if row is None:
            raise NotFound("Product not found")
        return product_from_row(row)

    async def create(self, fields: Dict[str, Any]) -> Product:
        async with self.db.connection() as conn:
            product_id = await conn.fetchval("""
                INSERT INTO products (
                    name, description, price, stock, image, category_id
                ) VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING id
            """,
                fields['name'],
                fields.get('description'),
                fields['price'],
                fields['stock'],
                fields.get('image'),
                fields['category_id']
            )
        logger.info(f"Created product {product_id}")
        return await self.get(product_id)

    async def update(self, product_id: int, fields: Dict[str, Any]) -> Product:
        """Update the given columns; keys outside the product columns are ignored"""
        query_parts = []
        params = []
        param_count = 1

        for key in _COLUMNS:
            if key in fields:
                query_parts.append(f"{key} = ${param_count}")
                params.append(fields[key])
                param_count += 1

        if not query_parts:
            return await self.get(product_id)

        params.append(product_id)
        query = f"""
            UPDATE products
            SET {', '.join(query_parts)}
            WHERE id = ${param_count}
        """

        async with self.db.connection() as conn:
            result = await conn.execute(query, *params)
        if result == "UPDATE 0":
            raise NotFound("Product not found")
        return await self.get(product_id)

    async def delete(self, product_id: int):
        async with self.db.connection() as conn:
            result = await conn.execute("""
                DELETE FROM products
                WHERE id = $1
            """, product_id)
        if result == "DELETE 0":
            raise NotFound("Product not found")
        logger.info(f"Deleted product {product_id}")
