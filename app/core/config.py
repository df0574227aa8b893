from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "doublespot"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_prefix: str = "/api"

    database_url: str = "sqlite+aiosqlite:///./doublespot.db"
    db_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 5
    run_migrations: bool = False

    cors_origins: str = "http://localhost:5173"
    log_level: str = "INFO"

    # Used by the terminal client
    api_base_url: str = "http://localhost:8080/api"

    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()
