"""Configuration for the Zabbix API client.

Settings are read from environment variables with the ``ZABBIX_`` prefix:
- ZABBIX_URL: API endpoint (e.g. http://zabbix.local/api_jsonrpc.php)
- ZABBIX_USER: Login name
- ZABBIX_PASSWORD: Login password
- ZABBIX_TIMEOUT: Request timeout in seconds (unset: no timeout)
- ZABBIX_VERIFY_SSL: Whether to verify SSL certificates (true/false)
"""

from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Zabbix API client settings.

    Example:
        >>> settings = Settings(url="https://zabbix.local/api_jsonrpc.php", user="Admin")
        >>> settings.has_credentials
        False
    """

    url: str = Field(default="http://localhost/api_jsonrpc.php")
    user: str | None = Field(default=None)
    password: SecretStr | None = Field(default=None)
    timeout: float | None = Field(default=None, gt=0)
    verify_ssl: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="ZABBIX_",
        case_sensitive=False,
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v

    @property
    def has_credentials(self) -> bool:
        return bool(self.user) and self.password is not None
