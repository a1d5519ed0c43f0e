import logging

import asyncpg
from aiogram import Router
from aiogram.enums import ContentType
from aiogram.types import Message

from ..db import save_request, touch_user
from ..filters import RouteIs
from ..texts import REQUEST_ACCEPTED, REQUEST_EMPTY
from ..utils.gate import GateDecision, Route

log = logging.getLogger(__name__)

router = Router()

# на что без текста всё же отвечаем подсказкой; служебные (вход в группу, закреп) молча пропускаем
MEDIA_TYPES = frozenset({
    ContentType.PHOTO,
    ContentType.VIDEO,
    ContentType.ANIMATION,
    ContentType.DOCUMENT,
    ContentType.AUDIO,
    ContentType.VOICE,
    ContentType.VIDEO_NOTE,
    ContentType.STICKER,
})


@router.message(RouteIs(Route.SUPPRESSED))
async def swallow_system_button(m: Message, decision: GateDecision):
    # подпись кнопки без своего хендлера: не отвечаем и дальше не передаём
    log.debug(f"Swallowed system button {m.text!r} from sender={decision.sender_id}")


@router.message(RouteIs(Route.DEFAULT))
async def handle_content(m: Message, decision: GateDecision):
    if not m.text:
        if m.content_type in MEDIA_TYPES:
            await m.answer(REQUEST_EMPTY)
        return

    if decision.sender_id is None:
        # нет автора, нечего записывать
        return

    try:
        await touch_user(decision.sender_id, m.from_user.username)
        req_id = await save_request(decision.sender_id, m.text)
    except (asyncpg.PostgresError, OSError):
        log.exception(f"Failed to save request from {decision.sender_id}")
        return await m.answer("Failed to process your message, try again later.")

    await m.answer(REQUEST_ACCEPTED.format(req_id=req_id))


def register_fallback_handlers(dp):
    dp.include_router(router)
