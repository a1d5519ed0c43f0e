import logging

from aiogram import Router
from aiogram.types import ErrorEvent

log = logging.getLogger(__name__)

router = Router()


@router.errors()
async def on_error(event: ErrorEvent):
    log.error(f"Unhandled error in update {event.update.update_id}", exc_info=event.exception)
    return True


def register_error_handlers(dp):
    dp.include_router(router)
