import logging
import re
from dataclasses import dataclass
from typing import Iterator, NewType

from aiogram.types import CallbackQuery, Message

log = logging.getLogger(__name__)

# только ASCII-цифры, со знаком или без
_ID_RE = re.compile(r"[+-]?[0-9]+")

# Автор сообщения (пользователь / бот)
UserId = NewType("UserId", int)
# Чат, в который пришло сообщение. Для личных чатов часто совпадает с UserId,
# но для проверки прав его использовать нельзя.
ChatId = NewType("ChatId", int)


@dataclass(frozen=True)
class AdminIds:
    """
    Список администраторов, собранный один раз при старте.
    """
    ids: frozenset[UserId] = frozenset()

    @classmethod
    def parse(cls, raw: str | None) -> "AdminIds":
        """
        "123, 456 ,789" -> {123, 456, 789}.
        Пустая строка / None -> никто не админ.
        Кривые значения пропускаются, остальные админы продолжают работать.
        """
        ids: set[UserId] = set()
        for part in (raw or "").split(","):
            part = part.strip()
            if not part:
                continue
            if not _ID_RE.fullmatch(part):
                log.warning(f"ADMIN_IDS: skipping malformed entry {part!r}")
                continue
            ids.add(UserId(int(part)))
        return cls(frozenset(ids))

    def __contains__(self, user_id: object) -> bool:
        return user_id in self.ids

    def __iter__(self) -> Iterator[UserId]:
        return iter(self.ids)

    def __len__(self) -> int:
        return len(self.ids)


def sender_id(event: Message | CallbackQuery) -> UserId | None:
    user = event.from_user
    if user is None:
        return None
    return UserId(user.id)


def chat_id(m: Message) -> ChatId:
    return ChatId(m.chat.id)


def is_admin(event: Message | CallbackQuery, admins: AdminIds) -> bool:
    uid = sender_id(event)
    if uid is None:
        return False
    return uid in admins
