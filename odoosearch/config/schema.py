"""Configuration schema using Pydantic.

Persisted to ~/.odoosearch/config.json; fields missing from the file can be supplied from the
environment, e.g. ``ODOOSEARCH_ODOO__API_KEY``.
"""

from pydantic import BaseModel, Field, ConfigDict
from pydantic_settings import BaseSettings


class OdooConfig(BaseModel):
    """Backend connection and credentials."""
    url: str = ""  # e.g. https://example.odoo.com
    database: str = ""
    user_login: str = ""
    api_key: str = ""  # API key or password


class SearchConfig(BaseModel):
    """Incremental search behaviour."""
    debounce_ms: int = Field(default=300, ge=0)
    min_chars: int = Field(default=2, ge=1)
    list_limit: int = Field(default=100, ge=1)  # cap for unfiltered listings


class HttpConfig(BaseModel):
    """HTTP client settings."""
    timeout_seconds: float = Field(default=20.0, gt=0)


class LoggingConfig(BaseModel):
    """Runtime log settings."""
    level: str = "INFO"
    file: bool = False  # also write ~/.odoosearch/logs/<command>.log


class Config(BaseSettings):
    """Root configuration for odoosearch."""
    odoo: OdooConfig = Field(default_factory=OdooConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def base_url(self) -> str:
        return self.odoo.url.strip().rstrip("/")

    @property
    def debounce_seconds(self) -> float:
        return self.search.debounce_ms / 1000.0

    def missing_fields(self) -> list[str]:
        """Names of required connection settings that are still empty."""
        required = {
            "odoo.url": self.odoo.url,
            "odoo.database": self.odoo.database,
            "odoo.userLogin": self.odoo.user_login,
            "odoo.apiKey": self.odoo.api_key,
        }
        return [name for name, value in required.items() if not value.strip()]

    @property
    def is_configured(self) -> bool:
        return not self.missing_fields()

    model_config = ConfigDict(
        env_prefix="ODOOSEARCH_",
        env_nested_delimiter="__"
    )
