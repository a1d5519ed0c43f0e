from aiogram import Dispatcher

from .broadcast import register_broadcast_handlers
from .start import register_start_handlers
from .menu import register_menu_handlers
from .admin_panel import register_admin_panel_handlers
from .fallback import register_fallback_handlers
from .errors import register_error_handlers


def register_all_handlers(dp: Dispatcher):
    # порядок важен: состояния рассылки -> команды -> кнопки меню -> гейт
    register_broadcast_handlers(dp)
    register_start_handlers(dp)
    register_menu_handlers(dp)
    register_admin_panel_handlers(dp)
    register_fallback_handlers(dp)
    register_error_handlers(dp)
