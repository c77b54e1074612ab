# repository/product_repository.py
import asyncio
import logging
import sqlite3
from typing import List, Optional

from database import get_db_connection
from models.product import Product
from repository.base import Repository

logger = logging.getLogger(__name__)


def row_to_product(row: sqlite3.Row) -> Product:
    return Product(**dict(row))


class SqliteProductRepository(Repository[Product]):
    """Product storage in the sqlite `products` table.

    A connection is opened per call and the blocking work runs in a
    worker thread.
    """

    def __init__(self, db_file: Optional[str] = None):
        self.db_file = db_file

    async def get_all(self) -> List[Product]:
        return await asyncio.to_thread(self._get_all)

    async def get_by_id(self, id: int) -> Optional[Product]:
        return await asyncio.to_thread(self._get_by_id, id)

    async def create(self, entity: Product) -> None:
        await asyncio.to_thread(self._create, entity)

    async def update(self, entity: Product) -> None:
        await asyncio.to_thread(self._update, entity)

    async def delete(self, entity: Optional[Product]) -> None:
        if entity is None or entity.id is None:
            logger.debug("Nothing to delete")
            return
        await asyncio.to_thread(self._delete, entity.id)

    def _get_all(self) -> List[Product]:
        conn = get_db_connection(self.db_file)
        try:
            rows = conn.execute("SELECT * FROM products ORDER BY id").fetchall()
        finally:
            conn.close()
        return [row_to_product(r) for r in rows]

    def _get_by_id(self, id: int) -> Optional[Product]:
        conn = get_db_connection(self.db_file)
        try:
            row = conn.execute("SELECT * FROM products WHERE id = ?", (id,)).fetchone()
        finally:
            conn.close()
        return row_to_product(row) if row else None

    def _create(self, entity: Product) -> None:
        conn = get_db_connection(self.db_file)
        try:
            cursor = conn.execute("""
                INSERT INTO products (name, price, stock, color)
                VALUES (?, ?, ?, ?)
            """, (entity.name, entity.price, entity.stock, entity.color))
            conn.commit()
            entity.id = cursor.lastrowid
        finally:
            conn.close()
        logger.debug(f"Inserted product {entity.id}")

    def _update(self, entity: Product) -> None:
        conn = get_db_connection(self.db_file)
        try:
            cursor = conn.execute("""
                UPDATE products
                SET name=?, price=?, stock=?, color=?
                WHERE id=?
            """, (entity.name, entity.price, entity.stock, entity.color, entity.id))
            conn.commit()
        finally:
            conn.close()
        if cursor.rowcount == 0:
            logger.debug(f"Update matched no product with id {entity.id}")

    def _delete(self, id: int) -> None:
        conn = get_db_connection(self.db_file)
        try:
            conn.execute("DELETE FROM products WHERE id = ?", (id,))
            conn.commit()
        finally:
            conn.close()
