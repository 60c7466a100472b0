"""
Pooled aiosqlite connections for the inventory database.

Connections run in autocommit mode. Writes go through `get_transaction`,
which opens the transaction with BEGIN IMMEDIATE so the write lock is held
from the first statement; a read-then-write on one product can therefore
not interleave with another writer, even across processes.

Each connection registers a `casefold(text)` SQL function so product-name
matching folds case the same way the in-memory store does.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from stockroom.config import Settings, get_logger, get_settings

logger = get_logger(__name__)


def sql_casefold(value: str | None) -> str | None:
    return value.casefold() if isinstance(value, str) else value


async def open_connection(db_path: Path, busy_timeout: int = 30000) -> aiosqlite.Connection:
    conn = await aiosqlite.connect(db_path, isolation_level=None)
    conn.row_factory = aiosqlite.Row

    await conn.execute("PRAGMA journal_mode=WAL")
    await conn.execute(f"PRAGMA busy_timeout={busy_timeout}")
    # products.category_name references categories.name
    await conn.execute("PRAGMA foreign_keys=ON")
    await conn.create_function("casefold", 1, sql_casefold, deterministic=True)
    return conn


class ConnectionPool:
    """Fixed set of connections to one database file, handed out by a queue."""

    def __init__(self, db_path: Path, pool_size: int = 5, busy_timeout: int = 30000):
        self.db_path = db_path
        self.pool_size = pool_size
        self.busy_timeout = busy_timeout

        self._idle: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue()
        self._connections: list[aiosqlite.Connection] = []
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionPool":
        storage = settings.storage
        return cls(storage.db_path, storage.pool_size, storage.busy_timeout)

    @property
    def initialized(self) -> bool:
        return bool(self._connections)

    async def initialize(self) -> None:
        async with self._lock:
            if self._connections:
                return
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            for _ in range(self.pool_size):
                conn = await open_connection(self.db_path, self.busy_timeout)
                self._connections.append(conn)
                self._idle.put_nowait(conn)

        logger.info(
            "sqlite_pool_opened",
            db_path=str(self.db_path),
            pool_size=self.pool_size,
        )

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow an autocommit connection, opening the pool on first use."""
        if not self.initialized:
            await self.initialize()
        conn = await self._idle.get()
        try:
            yield conn
        finally:
            self._idle.put_nowait(conn)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow a connection inside BEGIN IMMEDIATE; commit or roll back on exit."""
        async with self.acquire() as conn:
            await conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
                await conn.commit()
            except BaseException:
                # cancellation included, so no connection returns mid-transaction
                await conn.rollback()
                raise

    async def close(self) -> None:
        async with self._lock:
            for conn in self._connections:
                await conn.close()
            self._connections.clear()
            self._idle = asyncio.Queue()
        logger.info("sqlite_pool_closed", db_path=str(self.db_path))


_pool: ConnectionPool | None = None


async def get_pool() -> ConnectionPool:
    """Process-wide pool built from storage settings."""
    global _pool
    if _pool is None:
        _pool = ConnectionPool.from_settings(get_settings())
        await _pool.initialize()
    return _pool


async def close_pool() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None


@asynccontextmanager
async def get_connection() -> AsyncIterator[aiosqlite.Connection]:
    pool = await get_pool()
    async with pool.acquire() as conn:
        yield conn


@asynccontextmanager
async def get_transaction() -> AsyncIterator[aiosqlite.Connection]:
    pool = await get_pool()
    async with pool.transaction() as conn:
        yield conn
