from dataclasses import dataclass
from enum import Enum

BTN_ADMIN_PANEL = "Admin Panel"
BTN_SETTINGS = "⚙️ Settings"
BTN_FORMAT = "Format"
BTN_SUBSCRIPTION = "Subscription"
BTN_BACK = "Back"

BTN_BROADCAST = "📢 Broadcast"
BTN_STATS = "📊 Stats"
BTN_TOP10 = "🏆 Top 10"
BTN_ALL_USERS = "👥 All users"

QUALITY_H265 = "h265"
QUALITY_H264 = "h264"
QUALITY_AUDIO = "audio"
QUALITIES = (QUALITY_H265, QUALITY_H264, QUALITY_AUDIO)

MENU_BUTTONS = frozenset({
    BTN_ADMIN_PANEL,
    BTN_SETTINGS,
    BTN_FORMAT,
    BTN_SUBSCRIPTION,
    BTN_BACK,
})

ADMIN_PANEL_BUTTONS = frozenset({
    BTN_BROADCAST,
    BTN_STATS,
    BTN_TOP10,
    BTN_ALL_USERS,
})

SYSTEM_BUTTONS = MENU_BUTTONS | ADMIN_PANEL_BUTTONS | frozenset(QUALITIES)


class ButtonKind(str, Enum):
    SYSTEM_RESERVED = "system_reserved"
    ORDINARY = "ordinary"


@dataclass(frozen=True)
class ButtonRegistry:
    """
    Набор зарезервированных подписей кнопок.

    Подписи генерирует сам бот (keyboards.py), поэтому сравнение точное:
    без trim, с учётом регистра.
    admin_trigger: единственная подпись, которая одновременно и кнопка меню,
    и команда (открывает админ-панель).
    """
    labels: frozenset[str]
    admin_trigger: str

    def __post_init__(self):
        if self.admin_trigger not in self.labels:
            raise ValueError(f"admin trigger {self.admin_trigger!r} is not a registered label")

    def classify(self, text: str | None) -> ButtonKind:
        if text is None:
            return ButtonKind.ORDINARY
        if text in self.labels:
            return ButtonKind.SYSTEM_RESERVED
        return ButtonKind.ORDINARY

    def is_admin_trigger(self, text: str | None) -> bool:
        return text is not None and text == self.admin_trigger


DEFAULT_REGISTRY = ButtonRegistry(labels=SYSTEM_BUTTONS, admin_trigger=BTN_ADMIN_PANEL)
