import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError, TelegramRetryAfter

log = logging.getLogger(__name__)

MAX_FLOOD_SLEEP = 30


@dataclass
class BroadcastReport:
    total: int = 0
    sent: int = 0
    failed: int = 0

    def as_text(self) -> str:
        return (
            "✅ Broadcast completed!\n"
            f"📊 Sent: {self.sent}/{self.total}\n"
            f"❌ Failed: {self.failed}"
        )


async def send_broadcast(bot: Bot, user_ids: Iterable[int], text: str, per_second: int = 25) -> BroadcastReport:
    """
    Рассылка по личным чатам пользователей (id личного чата == id пользователя).
    Не более per_second сообщений в секунду.
    Любая ошибка Telegram API при отправке считается недоставкой, рассылка продолжается.
    """
    report = BroadcastReport()
    per_second = max(1, per_second)

    for idx, user_id in enumerate(user_ids):
        report.total += 1
        if idx > 0 and idx % per_second == 0:
            await asyncio.sleep(1)

        try:
            await bot.send_message(user_id, text)
            report.sent += 1
        except TelegramRetryAfter as e:
            report.failed += 1
            log.info(f"Flood wait {e.retry_after}s on {user_id}, sleeping")
            await asyncio.sleep(min(e.retry_after, MAX_FLOOD_SLEEP))
        except TelegramAPIError as e:
            report.failed += 1
            log.warning(f"Failed to send to {user_id}: {e}")

    log.info(f"Broadcast finished: sent={report.sent} failed={report.failed} total={report.total}")
    return report
