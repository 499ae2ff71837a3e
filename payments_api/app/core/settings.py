"""Environment-driven settings for the Payments API.

Database parameters follow the usual DB_* variables. A ``.env`` file in the
working directory is loaded first when it exists.
"""

import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

DEFAULT_SQLITE_URL = "sqlite:///./payments.db"
DEFAULT_CORS_ORIGINS = ["http://localhost:4200"]


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    def __init__(self):
        self.app_name = "Payments API"
        self.api_version = "1.0.0"
        self.environment = os.getenv("APP_ENV", "development")
        self.api_prefix = "/api"
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8080"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        cors_origins = os.getenv("CORS_ORIGINS")
        self.cors_origins = _split_csv(cors_origins) if cors_origins else list(DEFAULT_CORS_ORIGINS)

        self.db_host = os.getenv("DB_HOST")
        self.db_port = os.getenv("DB_PORT")
        self.db_user = os.getenv("DB_USER")
        self.db_password = os.getenv("DB_PASSWORD")
        self.db_name = os.getenv("DB_NAME")
        self.db_sslmode = os.getenv("DB_SSLMODE")
        self._database_url = os.getenv("DATABASE_URL")

    @property
    def database_url(self) -> str:
        if self._database_url:
            return self._database_url
        if self.db_host:
            query = {"sslmode": self.db_sslmode} if self.db_sslmode else {}
            url = URL.create(
                "postgresql+psycopg2",
                username=self.db_user,
                password=self.db_password,
                host=self.db_host,
                port=int(self.db_port) if self.db_port else None,
                database=self.db_name,
                query=query,
            )
            return url.render_as_string(hide_password=False)
        return DEFAULT_SQLITE_URL


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance, loading ``.env`` on first use."""
    global _settings_instance
    if _settings_instance is None:
        load_dotenv()
        _settings_instance = Settings()
    return _settings_instance
