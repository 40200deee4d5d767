"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    car_repository: str = "in_memory"  # in_memory or sql
    price_repository: str = "in_memory"  # in_memory or sql
    database_url: str = ""  # Required when car_repository=sql or price_repository=sql
    price_client: str = "http"  # http or local
    maps_client: str = "mock"  # mock or http
    pricing_service_url: str = "http://localhost:8082"
    maps_service_url: str = "http://localhost:9191"
    http_timeout_seconds: int = 10
    seed_prices: bool = True
    seed_price_count: int = 10

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
