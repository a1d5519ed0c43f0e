import html
import logging

import asyncpg
from aiogram import F, Router
from aiogram.types import Message

from ..buttons import BTN_ADMIN_PANEL, BTN_ALL_USERS, BTN_STATS, BTN_TOP10
from ..db import get_recent_users, get_stats, get_top_users
from ..filters import RouteIs
from ..keyboards import admin_panel_kb
from ..texts import ADMINS_ONLY
from ..utils.access import AdminIds, is_admin
from ..utils.gate import GateDecision, Route

log = logging.getLogger(__name__)

router = Router()


# Гейт пропускает кнопку панели от любого пользователя, права проверяются здесь.
@router.message(RouteIs(Route.ADMIN_PANEL))
async def open_admin_panel(m: Message, decision: GateDecision):
    if not decision.is_admin:
        log.info(f"Admin panel denied for sender={decision.sender_id}")
        return await m.answer(ADMINS_ONLY)

    await m.answer(BTN_ADMIN_PANEL, reply_markup=admin_panel_kb())


@router.message(F.text == BTN_STATS)
async def stats(m: Message, admins: AdminIds):
    if not is_admin(m, admins):
        return await m.answer(ADMINS_ONLY)

    try:
        total_users, total_requests = await get_stats()
    except (asyncpg.PostgresError, OSError):
        log.exception("Stats DB error")
        return await m.answer("Failed to retrieve statistics.")

    await m.answer(
        "📊 <b>Statistics</b>\n\n"
        f"👥 Total users: {total_users}\n"
        f"📥 Total requests: {total_requests}"
    )


@router.message(F.text == BTN_TOP10)
async def top10(m: Message, admins: AdminIds):
    if not is_admin(m, admins):
        return await m.answer(ADMINS_ONLY)

    try:
        users = await get_top_users(10)
    except (asyncpg.PostgresError, OSError):
        log.exception("Top 10 DB error")
        return await m.answer("Failed to retrieve top users.")

    lines = ["🏆 <b>Top 10 Users</b>\n"]
    for i, row in enumerate(users, start=1):
        lines.append(f"{i}. User <code>{row['user_telegram_id']}</code> – {row['count']} requests")

    await m.answer("\n".join(lines))


@router.message(F.text == BTN_ALL_USERS)
async def all_users(m: Message, admins: AdminIds):
    if not is_admin(m, admins):
        return await m.answer(ADMINS_ONLY)

    try:
        total, users = await get_recent_users(50)
    except (asyncpg.PostgresError, OSError):
        log.exception("All users DB error")
        return await m.answer("Failed to retrieve users list.")

    lines = [f"👥 <b>All Users</b> – Total: {total}\n\nShowing last {len(users)}:\n"]
    for u in users:
        name = html.escape(f"@{u['username']}") if u.get("username") else "-"
        lines.append(f"• <code>{u['telegram_id']}</code> {name}: {u['last_active']:%d.%m.%Y, %H:%M}")

    await m.answer("\n".join(lines))


def register_admin_panel_handlers(dp):
    dp.include_router(router)
