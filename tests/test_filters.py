import pytest

from menu_bot.src.buttons import BTN_ADMIN_PANEL, BTN_BACK
from menu_bot.src.filters import RouteIs
from menu_bot.src.utils.gate import Route

from conftest import USER_ID, make_message


@pytest.mark.asyncio
async def test_route_filter_injects_decision(gate):
    result = await RouteIs(Route.ADMIN_PANEL)(make_message(BTN_ADMIN_PANEL, user_id=USER_ID), gate=gate)

    assert isinstance(result, dict)
    assert result["decision"].route is Route.ADMIN_PANEL
    assert result["decision"].is_admin is False


@pytest.mark.asyncio
async def test_route_filter_rejects_other_routes(gate):
    m = make_message(BTN_BACK, user_id=USER_ID)
    assert await RouteIs(Route.DEFAULT)(m, gate=gate) is False
    assert await RouteIs(Route.ADMIN_PANEL)(m, gate=gate) is False
    assert await RouteIs(Route.SUPPRESSED)(m, gate=gate)
