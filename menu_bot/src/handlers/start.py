import logging

import asyncpg
from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from ..db import touch_user
from ..keyboards import main_kb
from ..texts import CANCELLED, HELLO, HELP_TEXT
from ..utils.access import sender_id

log = logging.getLogger(__name__)

router = Router()


@router.message(CommandStart())
async def cmd_start(m: Message, state: FSMContext):
    await state.clear()

    uid = sender_id(m)
    if uid is not None:
        try:
            await touch_user(uid, m.from_user.username)
        except (asyncpg.PostgresError, OSError):
            log.exception(f"Failed to update user activity for {uid}")

    await m.answer(HELLO, reply_markup=main_kb())


@router.message(Command("help"))
async def cmd_help(m: Message):
    await m.answer(HELP_TEXT)


@router.message(Command("cancel"))
async def cmd_cancel(m: Message, state: FSMContext):
    await state.clear()
    await m.answer(CANCELLED, reply_markup=main_kb())


def register_start_handlers(dp):
    dp.include_router(router)
