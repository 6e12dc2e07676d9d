"""Pydantic models for zabbix_api configuration validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ClientConfig(BaseModel):
    """Connection settings for a ZabbixApi client.

    Example config.json:
        {
            "api_url": "https://zabbix.example.com/api_jsonrpc.php",
            "user": "Admin",
            "password": "zabbix",
            "timeout": 10,
            "default_params": {"output": "extend"}
        }
    """

    model_config = ConfigDict(extra="forbid")

    api_url: str = ""
    """URL of api_jsonrpc.php."""

    user: str = ""
    """API username. Together with password, triggers login on construction."""

    password: str = ""
    """API password."""

    http_user: str = ""
    """Username for HTTP basic authorization (web server level)."""

    http_password: str = ""
    """Password for HTTP basic authorization."""

    auth_token: str = ""
    """Already issued auth token or API token; skips login when set."""

    timeout: float = Field(default=30.0, gt=0)
    """HTTP timeout in seconds."""

    verify_tls: bool = True
    """Verify the server's TLS certificate."""

    token_cache_dir: str | None = None
    """Token cache directory. None = system temp dir, "" = no caching."""

    default_params: dict[str, Any] = Field(default_factory=dict)
    """Params merged into every object-style API call."""

    print_communication: bool = False
    """Log (redacted) request and response payloads."""

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL when one is given."""
        if v and not v.startswith(("http://", "https://")):
            raise ValueError(f"api_url must start with http:// or https://, got: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_credentials(self) -> "ClientConfig":
        """Reject half-configured credential pairs."""
        if bool(self.user) != bool(self.password) and not self.auth_token:
            raise ValueError("user and password must be given together")
        if bool(self.http_user) != bool(self.http_password):
            raise ValueError("http_user and http_password must be given together")
        return self
