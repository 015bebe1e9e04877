from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BUSINESS_NAME: str = "StudioERP"
    CURRENCY_SYMBOL: str = "R$"
    RECENT_VISIT_DAYS: int = 30

    STORE_PROVIDER: str = "json"  # "json" or "memory"
    STORE_DATA_DIR: str = "./data/store"
    STORE_NAMESPACE: str = "studioERP_"


settings = Settings()
