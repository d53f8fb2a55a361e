# storefront/repositories/category_repository.py
import asyncpg
import logging
from typing import List, Optional
from ..errors import Conflict, NotFound, ValidationError
from ..models import Category, CategoryDetail
from .product_repository import PRODUCT_SELECT, product_from_row

logger = logging.getLogger(__name__)

_SELECT_WITH_COUNT = """
    SELECT c.id, c.name, c.description, c.created_at,
           COUNT(p.id) AS product_count
    FROM categories c
    LEFT JOIN products p ON p.category_id = c.id
"""


class CategoryRepository:
    """Category rows, each annotated with how many products use it"""

    def __init__(self, db):
        self.db = db

    async def list(self) -> List[Category]:
        async with self.db.connection() as conn:
            rows = await conn.fetch(_SELECT_WITH_COUNT + """
                GROUP BY c.id
                ORDER BY c.name ASC
            """)
            return [Category.model_validate(dict(row)) for row in rows]

    async def get(self, category_id: int) -> Category:
        async with self.db.connection() as conn:
            row = await conn.fetchrow(_SELECT_WITH_COUNT + """
                WHERE c.id = $1
                GROUP BY c.id
            """, category_id)
        if row is None:
            raise NotFound("Category not found")
        return Category.model_validate(dict(row))

    async def get_detail(self, category_id: int) -> CategoryDetail:
        """Category with its products, newest first"""
        category = await self.get(category_id)
        async with self.db.connection() as conn:
            rows = await conn.fetch(PRODUCT_SELECT + """
                WHERE p.category_id = $1
                ORDER BY p.created_at DESC, p.id DESC
            """, category_id)
        return CategoryDetail(
            **category.model_dump(),
            products=[product_from_row(row) for row in rows]
        )

    async def create(self, name: str, description: Optional[str] = None) -> Category:
        if not name or not name.strip():
            raise ValidationError(errors={'name': 'Name is required'})
        async with self.db.connection() as conn:
            row = await conn.fetchrow("""
                INSERT INTO categories (name, description)
                VALUES ($1, $2)
                RETURNING id, name, description, created_at
            """, name, description)
        logger.info(f"Created category {row['id']}")
        return Category.model_validate(dict(row))

    async def update(self, category_id: int, name: str,
                     description: Optional[str] = None) -> Category:
        if not name or not name.strip():
            raise ValidationError(errors={'name': 'Name is required'})
        async with self.db.connection() as conn:
            result = await conn.execute("""
                UPDATE categories
                SET name = $1, description = $2
                WHERE id = $3
            """, name, description, category_id)
        if result == "UPDATE 0":
            raise NotFound("Category not found")
        return await self.get(category_id)

    async def delete(self, category_id: int):
        async with self.db.connection() as conn:
            async with conn.transaction():
                exists = await conn.fetchval("""
                    SELECT id FROM categories
                    WHERE id = $1
                    FOR UPDATE
                """, category_id)
                if exists is None:
                    raise NotFound("Category not found")

                count = await conn.fetchval("""
                    SELECT COUNT(*)
                    FROM products
                    WHERE category_id = $1
                """, category_id)
                if count:
                    raise Conflict(f"Cannot delete. Has {count} products")

                try:
                    await conn.execute("""
                        DELETE FROM categories
                        WHERE id = $1
                    """, category_id)
                except asyncpg.ForeignKeyViolationError as e:
                    # a product was attached after the count
                    raise Conflict("Cannot delete. Category is in use") from e
        logger.info(f"Deleted category {category_id}")
