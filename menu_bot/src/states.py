from aiogram.fsm.state import StatesGroup, State

class BroadcastForm(StatesGroup):
    WaitingForMessage = State()
    WaitingForConfirmation = State()
