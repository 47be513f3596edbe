"""Application settings, read from environment variables and an optional .env file."""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    service_name: str = "bookshelf"

    # Database: DATABASE_URL wins, otherwise a PostgreSQL URL is composed
    # from the DB_* parts when DB_HOST is set
    database_url: Optional[str] = None
    db_user: str = ""
    db_password: str = ""
    db_host: str = ""
    db_port: Optional[int] = None
    db_name: str = ""
    db_sslmode: str = ""
    db_auto_migrate: bool = False

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        if self.db_host:
            query = {"sslmode": self.db_sslmode} if self.db_sslmode else {}
            url = URL.create(
                "postgresql+psycopg2",
                username=self.db_user or None,
                password=self.db_password or None,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name or None,
                query=query,
            )
            return url.render_as_string(hide_password=False)
        return "sqlite:///books.db"

    def masked_url(self) -> str:
        return make_url(self.sqlalchemy_url).render_as_string(hide_password=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()
