import logging

import asyncpg
from aiogram import F, Router
from aiogram.types import Message

from ..buttons import BTN_BACK, BTN_FORMAT, BTN_SETTINGS, QUALITIES
from ..db import set_quality
from ..keyboards import format_kb, main_kb, settings_kb
from ..texts import BACK_TO_MENU, FORMAT_TEXT
from ..utils.access import AdminIds, is_admin, sender_id

log = logging.getLogger(__name__)

router = Router()


@router.message(F.text == BTN_SETTINGS)
async def open_settings(m: Message, admins: AdminIds):
    await m.answer(BTN_SETTINGS, reply_markup=settings_kb(show_admin=is_admin(m, admins)))


@router.message(F.text == BTN_FORMAT)
async def open_format(m: Message):
    await m.answer(FORMAT_TEXT, reply_markup=format_kb())


@router.message(F.text == BTN_BACK)
async def back_to_menu(m: Message):
    await m.answer(BACK_TO_MENU, reply_markup=main_kb())


@router.message(F.text.in_(QUALITIES))
async def choose_quality(m: Message):
    uid = sender_id(m)
    if uid is None:
        return

    try:
        await set_quality(uid, m.text)
    except (asyncpg.PostgresError, OSError):
        log.exception(f"Failed to save quality for {uid}")
        return await m.answer("Failed to save the format, try again later.")

    await m.answer(f"Quality set to {m.text}", reply_markup=main_kb())


def register_menu_handlers(dp):
    dp.include_router(router)
