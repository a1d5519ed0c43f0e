from aiogram.types import (
    InlineKeyboardButton, InlineKeyboardMarkup, KeyboardButton, ReplyKeyboardMarkup,
)

from .buttons import (
    BTN_ADMIN_PANEL, BTN_ALL_USERS, BTN_BACK, BTN_BROADCAST, BTN_FORMAT,
    BTN_SETTINGS, BTN_STATS, BTN_TOP10, QUALITIES,
)


def main_kb():
    return ReplyKeyboardMarkup(
        keyboard=[[KeyboardButton(text=BTN_SETTINGS)]],
        resize_keyboard=True,
    )


def settings_kb(show_admin: bool) -> ReplyKeyboardMarkup:
    rows = [[KeyboardButton(text=BTN_FORMAT)]]

    # кнопку панели видят только админы
    if show_admin:
        rows.append([KeyboardButton(text=BTN_ADMIN_PANEL)])

    rows.append([KeyboardButton(text=BTN_BACK)])
    return ReplyKeyboardMarkup(keyboard=rows, resize_keyboard=True)


def format_kb():
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text=q) for q in QUALITIES],
            [KeyboardButton(text=BTN_BACK)],
        ],
        resize_keyboard=True,
    )


def admin_panel_kb():
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text=BTN_STATS), KeyboardButton(text=BTN_TOP10)],
            [KeyboardButton(text=BTN_ALL_USERS), KeyboardButton(text=BTN_BROADCAST)],
            [KeyboardButton(text=BTN_BACK)],
        ],
        resize_keyboard=True,
    )


def broadcast_confirm_kb():
    return InlineKeyboardMarkup(inline_keyboard=[[
        InlineKeyboardButton(text="✅ Send to all", callback_data="broadcast:confirm"),
        InlineKeyboardButton(text="❌ Cancel", callback_data="broadcast:cancel"),
    ]])
