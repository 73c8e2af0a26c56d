from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    database_url: str | None = None  # e.g. sqlite+aiosqlite:///./hotel.db
    use_in_memory: bool = True
    sql_echo: bool = False

    stripe_api_key: str | None = Field(default=None, alias="STRIPE_SECRET_KEY")
    stripe_max_network_retries: int = 0
    payment_currency: str = "usd"
    payment_timeout_seconds: float = 10.0

    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
