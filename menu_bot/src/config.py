from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.access import AdminIds


class Settings(BaseSettings):
    BOT_TOKEN: str
    DATABASE_URL: str
    ADMIN_IDS: str = ""

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None  # сюда пишутся только ошибки

    BROADCAST_RATE: int = 25  # сообщений в секунду

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent / ".env",
        extra="ignore",
    )

    @property
    def admin_ids(self) -> AdminIds:
        return AdminIds.parse(self.ADMIN_IDS)
