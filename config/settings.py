"""Конфигурация сервиса диагностики"""
from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    """Настройки из окружения и .env"""

    # База диагностик
    database_url: str = "sqlite:///./assessment.db"

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Telegram бот; API работает и без токена
    telegram_bot_token: Optional[str] = None
    history_limit: int = 10

    # Шрифт с японскими иероглифами для диаграммы (иначе ищется в системе)
    chart_font_path: Optional[str] = None

    # Railway выставляет RAILWAY_ENVIRONMENT
    railway_environment: Optional[str] = None

    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_railway(self) -> bool:
        return self.railway_environment is not None or os.getenv("RAILWAY_ENVIRONMENT") is not None

    class Config:
        # На Railway переменные приходят только из окружения
        env_file = None if os.getenv("RAILWAY_ENVIRONMENT") else ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
