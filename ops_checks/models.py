from __future__ import annotations

from typing import List, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

PING_TIMEOUT_SECONDS = 5


class MembershipCheckConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1)
    headers: List[str] = Field(default_factory=list)
    ssl: bool = False
    insecure: bool = False
    username: Optional[str] = None
    password: Optional[str] = None
    cert: Optional[str] = None
    cert_key: Optional[str] = None
    cacert: Optional[str] = None
    timeout: int = Field(default=15, ge=1)

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in {"http", "https"}:
            raise ValueError(f"unsupported URL scheme: {parts.scheme or '(none)'}")
        if not parts.hostname:
            raise ValueError(f"URL has no host: {value}")
        return value

    @property
    def use_tls(self) -> bool:
        return self.ssl or urlsplit(self.url).scheme == "https"

    @property
    def request_url(self) -> str:
        """
        The URL actually requested: scheme forced to https when TLS is on,
        empty path replaced with "/", and any fragment dropped.
        """
        parts = urlsplit(self.url)
        scheme = "https" if self.use_tls else parts.scheme
        target = parts.path or "/"
        if parts.query:
            target = f"{target}?{parts.query}"
        return f"{scheme}://{parts.netloc}{target}"

    @property
    def has_auth(self) -> bool:
        return self.username is not None or self.password is not None


class PingCheckConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    server: str = "localhost"
    port: str = "8000"
    token: str = ""

    @property
    def ping_url(self) -> str:
        # Literal substitution, nothing is URL-encoded.
        return f"http://{self.server}:{self.port}/metrics/{self.token}/ping"
