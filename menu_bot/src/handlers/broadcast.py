import logging

import asyncpg
from aiogram import Bot, F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from ..buttons import BTN_BROADCAST
from ..config import Settings
from ..db import get_all_user_ids
from ..keyboards import broadcast_confirm_kb
from ..states import BroadcastForm
from ..texts import ADMINS_ONLY, ASK_BROADCAST, BROADCAST_CONFIRM, BROADCAST_TEXT_ONLY, CANCELLED
from ..utils.access import AdminIds, is_admin
from ..utils.broadcast import send_broadcast

log = logging.getLogger(__name__)

router = Router()


# Пока ждём текст рассылки, любое сообщение (даже подпись кнопки) считается текстом рассылки.
@router.message(BroadcastForm.WaitingForMessage, Command("cancel"))
async def broadcast_cancel_cmd(m: Message, state: FSMContext):
    await state.clear()
    await m.answer(CANCELLED)


@router.message(BroadcastForm.WaitingForMessage)
async def broadcast_got_message(m: Message, state: FSMContext):
    if m.text is None:
        return await m.answer(BROADCAST_TEXT_ONLY)

    body = m.html_text
    await m.answer("📝 Preview:")
    await m.answer(body)
    await m.answer(BROADCAST_CONFIRM, reply_markup=broadcast_confirm_kb())

    await state.update_data(message=body)
    await state.set_state(BroadcastForm.WaitingForConfirmation)


@router.message(F.text == BTN_BROADCAST)
async def broadcast_start(m: Message, state: FSMContext, admins: AdminIds):
    if not is_admin(m, admins):
        return await m.answer(ADMINS_ONLY)

    await state.set_state(BroadcastForm.WaitingForMessage)
    await m.answer(ASK_BROADCAST)


@router.callback_query(BroadcastForm.WaitingForConfirmation, F.data == "broadcast:cancel")
async def broadcast_cancel(c: CallbackQuery, state: FSMContext):
    await state.clear()
    await c.message.edit_reply_markup(reply_markup=None)
    await c.answer("❌ Broadcast cancelled")


@router.callback_query(BroadcastForm.WaitingForConfirmation, F.data == "broadcast:confirm")
async def broadcast_confirm(c: CallbackQuery, state: FSMContext, bot: Bot, admins: AdminIds, settings: Settings):
    if not is_admin(c, admins):
        await state.clear()
        return await c.answer(ADMINS_ONLY, show_alert=True)

    data = await state.get_data()
    await state.clear()

    await c.message.edit_reply_markup(reply_markup=None)
    await c.answer("🚀 Starting broadcast...")

    try:
        user_ids = await get_all_user_ids()
    except (asyncpg.PostgresError, OSError):
        log.exception("Broadcast: failed to load users")
        return await c.message.answer("❌ Database error.")

    await c.message.answer("🚀 Broadcasting...")
    report = await send_broadcast(bot, user_ids, data["message"], settings.BROADCAST_RATE)
    log.info(f"Broadcast by {c.from_user.id}: {report}")
    await c.message.answer(report.as_text())


def register_broadcast_handlers(dp):
    dp.include_router(router)
