"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from sqlalchemy.engine import URL

DEFAULT_ODBC_DRIVER = "ODBC Driver 18 for SQL Server"
DEFAULT_SCRAPE_URL = "https://loteriasbr.com/"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection settings for the results store.

    Passed explicitly to every data-access operation instead of living in a
    module-level connection object.
    """

    user: str | None = None
    password: str | None = None
    host: str | None = None
    name: str | None = None
    driver: str = DEFAULT_ODBC_DRIVER
    encrypt: bool = True
    trust_server_certificate: bool = True
    url: str | None = None

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        return cls(
            user=os.getenv("DB_USER"),
            password=os.getenv("DB_PASSWORD"),
            host=os.getenv("DB_HOST"),
            name=os.getenv("DB_NAME"),
            driver=os.getenv("DB_ODBC_DRIVER", DEFAULT_ODBC_DRIVER),
            url=os.getenv("DATABASE_URL"),
        )

    def to_url(self) -> str:
        """Resolve DB connection string.

        Priority:
          1) explicit url (DATABASE_URL)
          2) SQL Server from DB_* values, encrypted transport
          3) Fallback to local sqlite
        """

        if self.url:
            return self.url

        if self.host and self.name:
            query = {
                "driver": self.driver,
                "Encrypt": "yes" if self.encrypt else "no",
                "TrustServerCertificate": "yes" if self.trust_server_certificate else "no",
            }
            url = URL.create(
                drivername="mssql+pyodbc",
                username=self.user,
                password=self.password,
                host=self.host,
                database=self.name,
                query=query,
            )
            return url.render_as_string(hide_password=False)

        return "sqlite:///./loterias.db"


@dataclass(frozen=True)
class ScraperConfig:
    """Where and how long to look for result cards."""

    url: str = DEFAULT_SCRAPE_URL
    selector_timeout_ms: int = 10_000
    headless: bool = True

    @classmethod
    def from_env(cls) -> "ScraperConfig":
        return cls(
            url=os.getenv("SCRAPE_URL", DEFAULT_SCRAPE_URL),
            selector_timeout_ms=_env_int("SCRAPE_TIMEOUT_MS", 10_000),
            headless=_env_bool("SCRAPE_HEADLESS", True),
        )


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    PORT: int = field(default_factory=lambda: _env_int("PORT", 3000))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    DATABASE: DatabaseConfig = field(default_factory=DatabaseConfig.from_env)
    SCRAPER: ScraperConfig = field(default_factory=ScraperConfig.from_env)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> BaseConfig:
    """Build the configuration for the current APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig()
    return DevelopmentConfig()
