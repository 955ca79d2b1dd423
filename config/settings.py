from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Upstream Warframe.Market API
    WFM_BASE_URL: str = "https://api.warframe.market/v1"
    WFM_LANGUAGE: str = "en"
    WFM_PLATFORM: str = "pc"  # pc / xbox / ps4 / switch

    # Raw token, no "JWT " prefix - sent as "Authorization: JWT <token>"
    WFM_JWT: str | None = None
    WFM_TIMEOUT_SECONDS: float = 15.0

    # Max in-flight order fetches per /flips request
    FLIPS_MAX_CONCURRENCY: int = 4

    # App
    APP_NAME: str = "Warframe Market Aggregator"
    DEBUG: bool = False


settings = Settings()
