import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage

from .buttons import DEFAULT_REGISTRY
from .config import Settings
from .db import close_db, init_db
from .handlers import register_all_handlers
from .utils.gate import DispatchGate


def setup_logging(level: str, log_file: str | None = None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.ERROR)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


async def main():
    settings = Settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    admins = settings.admin_ids
    logging.info(f"Loaded {len(admins)} admin id(s)")

    await init_db(settings.DATABASE_URL)

    bot = Bot(
        token=settings.BOT_TOKEN,
        default=DefaultBotProperties(parse_mode="HTML"),
    )

    # admins / gate / settings доступны в хендлерах и фильтрах по имени
    dp = Dispatcher(
        storage=MemoryStorage(),
        admins=admins,
        gate=DispatchGate(DEFAULT_REGISTRY, admins),
        settings=settings,
    )
    register_all_handlers(dp)

    await bot.delete_webhook(drop_pending_updates=True)

    me = await bot.get_me()
    logging.info(f"Menu bot started as @{me.username} ({me.id})")

    try:
        await dp.start_polling(bot)
    finally:
        await close_db()
        await bot.session.close()


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
