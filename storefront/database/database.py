# storefront/database/database.py
import asyncio
import asyncpg
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional
from ..config import Config
from ..errors import Conflict, InvalidReference, StorageTimeout, StorageUnavailable, ValidationError


class Database:
    """Owns the asyncpg pool shared by the repositories"""

    def __init__(self, dsn: Optional[str] = None,
                 command_timeout: Optional[float] = None):
        self.dsn = dsn
        self.command_timeout = command_timeout or Config.DB_COMMAND_TIMEOUT
        self.pool: Optional[asyncpg.Pool] = None
        self.logger = logging.getLogger(__name__)

    async def connect(self):
        """Open the pool and apply pending migrations"""
        try:
            self.pool = await asyncpg.create_pool(
                self.dsn or Config.require_database_url(),
                min_size=Config.DB_POOL_MIN,
                max_size=Config.DB_POOL_MAX,
                command_timeout=self.command_timeout,
                timeout=self.command_timeout
            )

            await self._run_migrations()

            self.logger.info("Database connection established")
        except Exception as e:
            self.logger.error(f"Error connecting to database: {e}")
            raise

    async def close(self):
        """Close the pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
            self.logger.info("Database connection closed")

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[asyncpg.Connection]:
        """Acquire a pooled connection, translating driver errors"""
        if self.pool is None:
            raise StorageUnavailable("Database is not connected")
        try:
            async with self.pool.acquire(timeout=self.command_timeout) as conn:
                yield conn
        except asyncpg.ForeignKeyViolationError as e:
            raise InvalidReference(getattr(e, "detail", None) or "Referenced record does not exist") from e
        except asyncpg.UniqueViolationError as e:
            raise Conflict("Duplicate entry") from e
        except asyncpg.DataError as e:
            # value rejected by a column type, e.g. int4 overflow
            self.logger.info(f"Rejected query argument: {e}")
            raise ValidationError("Invalid input") from e
        except asyncio.TimeoutError as e:
            self.logger.warning("Database operation timed out")
            raise StorageTimeout() from e
        except (asyncpg.PostgresConnectionError, asyncpg.InterfaceError, OSError) as e:
            self.logger.error(f"Database unavailable: {e}")
            raise StorageUnavailable() from e

    async def _run_migrations(self):
        """Apply the SQL files under migrations/ that have not run yet"""
        try:
            migrations_path = Path(__file__).parent / "migrations"

            async with self.pool.acquire() as conn:
                await conn.execute("""
                    CREATE TABLE IF NOT EXISTS migrations (
                        id SERIAL PRIMARY KEY,
                        name VARCHAR(255) NOT NULL,
                        applied_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
                    )
                """)

                for migration_file in sorted(migrations_path.glob("*.sql")):
                    migration_name = migration_file.name

                    is_applied = await conn.fetchval(
                        "SELECT COUNT(*) FROM migrations WHERE name = $1",
                        migration_name
                    )

                    if not is_applied:
                        async with conn.transaction():
                            await conn.execute(migration_file.read_text())
                            await conn.execute(
                                "INSERT INTO migrations (name) VALUES ($1)",
                                migration_name
                            )

                        self.logger.info(f"Migration {migration_name} applied")

        except Exception as e:
            self.logger.error(f"Error running migrations: {e}")
            raise
