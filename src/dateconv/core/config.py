"""Environment-backed configuration for the date conversion service."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DateAPIConfig(BaseSettings):
    """Environment-backed configuration for the HTTP service.

    Config usage map:
    - host/port: api/app.py (uvicorn bind)
    - allow_origins: api/app.py (CORS middleware)
    - log_level: api/app.py main and runtime.py main (configure_logging, uvicorn log level)
    """
    model_config = SettingsConfigDict(extra="ignore", case_sensitive=False, populate_by_name=True)

    host: str = Field(default="0.0.0.0", alias="DATE_API_HOST")
    port: int = Field(default=4447, alias="DATE_API_PORT")
    allow_origins: str = Field(default="*", alias="DATE_API_ALLOW_ORIGINS")
    log_level: str = Field(default="INFO", alias="DATE_API_LOG_LEVEL")

    @field_validator("host")
    @classmethod
    def _non_empty_host(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("port")
    @classmethod
    def _valid_port(cls, value: int) -> int:
        if value < 1 or value > 65535:
            raise ValueError("must be in [1, 65535]")
        return value

    @field_validator("log_level")
    @classmethod
    def _valid_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return normalized

    def origins(self) -> list[str]:
        return [origin.strip() for origin in self.allow_origins.split(",") if origin.strip()]

    @classmethod
    def from_env(cls) -> "DateAPIConfig":
        return cls()
