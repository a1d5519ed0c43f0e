"""
Маршрутизация текстовых сообщений: куда отдать сообщение после всех кнопочных хендлеров.

Классификация (по тексту) и проверка админа (по отправителю) считаются независимо,
собираются вместе только здесь.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from aiogram.types import Message

from ..buttons import ButtonKind, ButtonRegistry
from .access import AdminIds, UserId, is_admin, sender_id

log = logging.getLogger(__name__)


class Route(str, Enum):
    DEFAULT = "default"
    ADMIN_PANEL = "admin_panel"
    SUPPRESSED = "suppressed"


Predicate = Callable[[str | None, ButtonKind, ButtonRegistry], bool]


def _is_admin_trigger(text: str | None, kind: ButtonKind, registry: ButtonRegistry) -> bool:
    return kind is ButtonKind.SYSTEM_RESERVED and registry.is_admin_trigger(text)


def _is_reserved(text: str | None, kind: ButtonKind, registry: ButtonRegistry) -> bool:
    return kind is ButtonKind.SYSTEM_RESERVED


# Порядок важен: первая сработавшая строка побеждает.
# Кнопка админ-панели пропускается для всех, права проверяет сам хендлер панели.
ROUTING_TABLE: tuple[tuple[Predicate, Route], ...] = (
    (_is_admin_trigger, Route.ADMIN_PANEL),
    (_is_reserved, Route.SUPPRESSED),
)


def route_text(text: str | None, registry: ButtonRegistry) -> Route:
    kind = registry.classify(text)
    for predicate, route in ROUTING_TABLE:
        if predicate(text, kind, registry):
            return route
    return Route.DEFAULT


@dataclass(frozen=True)
class GateDecision:
    route: Route
    is_admin: bool
    sender_id: UserId | None


class DispatchGate:
    def __init__(self, registry: ButtonRegistry, admins: AdminIds):
        self.registry = registry
        self.admins = admins

    def decide(self, m: Message) -> GateDecision:
        decision = GateDecision(
            route=route_text(m.text, self.registry),
            is_admin=is_admin(m, self.admins),
            sender_id=sender_id(m),
        )
        log.debug(f"gate: sender={decision.sender_id} admin={decision.is_admin} route={decision.route.value}")
        return decision
