from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.enums import ContentType
from aiogram.types import Chat, Message, User

from menu_bot.src.buttons import DEFAULT_REGISTRY
from menu_bot.src.utils.access import AdminIds
from menu_bot.src.utils.gate import DispatchGate

ADMIN_ID = 111111
OTHER_ADMIN_ID = 222222
USER_ID = 555555


def make_message(text=None, user_id=USER_ID, chat_id=None, chat_type="private"):
    """Настоящий aiogram Message; user_id=None: сообщение без автора."""
    if chat_id is None:
        chat_id = user_id if user_id is not None else -100500
    from_user = None
    if user_id is not None:
        from_user = User(id=user_id, is_bot=False, first_name="Test", username=f"user{user_id}")
    return Message(
        message_id=1,
        date=datetime.now(),
        chat=Chat(id=chat_id, type=chat_type),
        from_user=from_user,
        text=text,
    )


def mock_message(text=None, user_id=USER_ID, chat_id=None, content_type=None):
    """Message-заглушка для хендлеров: answer() не ходит в Telegram."""
    m = MagicMock()
    m.text = text
    m.content_type = content_type or (ContentType.TEXT if text else ContentType.UNKNOWN)
    m.html_text = text
    m.chat.id = chat_id if chat_id is not None else user_id
    if user_id is None:
        m.from_user = None
    else:
        m.from_user.id = user_id
        m.from_user.username = f"user{user_id}"
    m.answer = AsyncMock()
    return m


@pytest.fixture
def admins():
    return AdminIds.parse(f"{ADMIN_ID},{OTHER_ADMIN_ID}")


@pytest.fixture
def gate(admins):
    return DispatchGate(DEFAULT_REGISTRY, admins)


@pytest.fixture
def state():
    st = AsyncMock()
    st.get_data.return_value = {}
    return st
