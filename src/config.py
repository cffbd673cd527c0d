from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_POSTGRES = "postgres"
STORAGE_SQLITE = "sqlite"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = ""
    sqlite_path: str = "./products.db"
    storage_backend: str | None = None
    auto_create_schema: bool = True

    # Application
    environment: str = "development"
    port: int = 3000
    log_level: str = "info"

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:8000"

    # Product codes
    product_code_space_size: int = Field(999, ge=1, le=999)
    product_code_max_attempts: int = Field(10, ge=1)
    product_code_commit_attempts: int = Field(3, ge=1)

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def resolved_storage_backend(self) -> str:
        """Explicit backend wins; otherwise PostgreSQL in production or when a URL is set."""
        if self.storage_backend:
            return self.storage_backend.strip().lower()
        if self.environment == "production" or self.database_url:
            return STORAGE_POSTGRES
        return STORAGE_SQLITE

    @property
    def sqlalchemy_url(self) -> str:
        if self.resolved_storage_backend == STORAGE_POSTGRES:
            url = self.database_url
            for prefix in ("postgres://", "postgresql://"):
                if url.startswith(prefix):
                    return "postgresql+asyncpg://" + url[len(prefix):]
            return url
        return f"sqlite+aiosqlite:///{self.sqlite_path}"


settings = Settings()
