import asyncpg
from typing import Optional, Dict, Any, List

_pool: Optional[asyncpg.Pool] = None


async def init_db(dsn: str) -> None:
    """
    Создаём пул и таблицы (users + requests).
    Безопасно вызывать при каждом старте.
    """
    global _pool
    if _pool is None:
        _pool = await asyncpg.create_pool(dsn, min_size=1, max_size=5)

    async with _pool.acquire() as conn:
        await conn.execute(
            """
            CREATE TABLE IF NOT EXISTS users (
                telegram_id  BIGINT PRIMARY KEY,
                username     TEXT,
                quality      TEXT NOT NULL DEFAULT 'h264',
                last_active  TIMESTAMPTZ NOT NULL DEFAULT NOW()
            );
            """
        )

        # Всё, что дошло до обычного хендлера
        await conn.execute(
            """
            CREATE TABLE IF NOT EXISTS requests (
                id                BIGSERIAL PRIMARY KEY,
                user_telegram_id  BIGINT NOT NULL REFERENCES users(telegram_id) ON DELETE CASCADE,
                text              TEXT NOT NULL,
                created_at        TIMESTAMPTZ NOT NULL DEFAULT NOW()
            );
            """
        )


async def get_pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("init_db() must be called first")
    return _pool


async def close_db() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None


# -----------------------
# FUNCTIONS: users
# -----------------------

async def touch_user(telegram_id: int, username: str | None = None) -> None:
    """
    Создаёт пользователя, если его нет, иначе обновляет username/last_active.
    telegram_id: id отправителя, не id чата.
    """
    pool = await get_pool()
    async with pool.acquire() as conn:
        await conn.execute(
            """
            INSERT INTO users (telegram_id, username)
            VALUES ($1, $2)
            ON CONFLICT (telegram_id) DO UPDATE
            SET username = COALESCE(EXCLUDED.username, users.username),
                last_active = NOW();
            """,
            telegram_id,
            username,
        )


async def set_quality(telegram_id: int, quality: str) -> None:
    pool = await get_pool()
    async with pool.acquire() as conn:
        await conn.execute(
            """
            INSERT INTO users (telegram_id, quality)
            VALUES ($1, $2)
            ON CONFLICT (telegram_id) DO UPDATE
            SET quality = EXCLUDED.quality,
                last_active = NOW();
            """,
            telegram_id,
            quality,
        )


async def get_all_user_ids() -> List[int]:
    pool = await get_pool()
    async with pool.acquire() as conn:
        rows = await conn.fetch("SELECT telegram_id FROM users ORDER BY telegram_id")
        return [r["telegram_id"] for r in rows]


# -----------------------
# FUNCTIONS: requests
# -----------------------

async def save_request(telegram_id: int, text: str) -> int:
    pool = await get_pool()
    async with pool.acquire() as conn:
        return await conn.fetchval(
            """
            INSERT INTO requests (user_telegram_id, text)
            VALUES ($1, $2)
            RETURNING id;
            """,
            telegram_id,
            text,
        )


# -----------------------
# FUNCTIONS: admin stats
# -----------------------

async def get_stats() -> tuple[int, int]:
    pool = await get_pool()
    async with pool.acquire() as conn:
        total_users = await conn.fetchval("SELECT COUNT(*) FROM users")
        total_requests = await conn.fetchval("SELECT COUNT(*) FROM requests")
        return total_users, total_requests


async def get_top_users(limit: int = 10) -> List[Dict[str, Any]]:
    pool = await get_pool()
    async with pool.acquire() as conn:
        rows = await conn.fetch(
            """
            SELECT user_telegram_id, COUNT(*) AS count
            FROM requests
            GROUP BY user_telegram_id
            ORDER BY count DESC
            LIMIT $1;
            """,
            limit,
        )
        return [dict(r) for r in rows]


async def get_recent_users(limit: int = 50) -> tuple[int, List[Dict[str, Any]]]:
    pool = await get_pool()
    async with pool.acquire() as conn:
        total = await conn.fetchval("SELECT COUNT(*) FROM users")
        rows = await conn.fetch(
            """
            SELECT telegram_id, username, last_active
            FROM users
            ORDER BY last_active DESC
            LIMIT $1;
            """,
            limit,
        )
        return total, [dict(r) for r in rows]
