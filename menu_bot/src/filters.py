from aiogram.filters import BaseFilter
from aiogram.types import Message

from .utils.gate import DispatchGate, Route


class RouteIs(BaseFilter):
    """
    Пропускает сообщение, если гейт отправил его в нужный маршрут.
    В хендлер прокидывается decision (GateDecision).
    """

    def __init__(self, route: Route):
        self.route = route

    async def __call__(self, message: Message, gate: DispatchGate) -> bool | dict:
        decision = gate.decide(message)
        if decision.route is not self.route:
            return False
        return {"decision": decision}
