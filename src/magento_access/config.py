"""Configuration management for the Magento client."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from magento_access.exceptions import MagentoValidationError

REST_API_ROOT = "api/rest"


def _get_config_dir() -> Path:
    """Get XDG-compliant config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "magento-access"
    return Path.home() / ".config" / "magento-access"


def _require(value: str | None, field: str) -> None:
    if value is None or not value.strip():
        msg = f"{field} must not be empty"
        raise MagentoValidationError(msg, field=field)


@dataclass(frozen=True, slots=True)
class MagentoConfig:
    """Magento store credentials and endpoints.

    The three OAuth endpoints default to the Magento 1.x locations under
    ``base_url`` when not given explicitly.
    """

    consumer_key: str
    consumer_secret: str
    base_url: str
    request_token_url: str | None = None
    authorize_url: str | None = None
    access_token_url: str | None = None

    # HTTP timeout in seconds; None keeps the httpx default
    timeout: float | None = None

    verifier_poll_interval: float = 2.0
    verifier_max_attempts: int = 300

    def __post_init__(self) -> None:
        _require(self.consumer_key, "consumer_key")
        _require(self.consumer_secret, "consumer_secret")
        _require(self.base_url, "base_url")
        for name in ("request_token_url", "authorize_url", "access_token_url"):
            value = getattr(self, name)
            if value is not None:
                _require(value, name)

        if self.verifier_max_attempts < 1:
            msg = "verifier_max_attempts must be at least 1"
            raise MagentoValidationError(msg, field="verifier_max_attempts")
        if self.verifier_poll_interval < 0:
            msg = "verifier_poll_interval must not be negative"
            raise MagentoValidationError(msg, field="verifier_poll_interval")

    @property
    def store_url(self) -> str:
        """Base store URL without a trailing slash."""
        return self.base_url.rstrip("/")

    @property
    def request_token_endpoint(self) -> str:
        return self.request_token_url or f"{self.store_url}/oauth/initiate"

    @property
    def authorize_endpoint(self) -> str:
        return self.authorize_url or f"{self.store_url}/admin/oauth_authorize"

    @property
    def access_token_endpoint(self) -> str:
        return self.access_token_url or f"{self.store_url}/oauth/token"

    def http_client_options(self) -> dict[str, Any]:
        """Keyword arguments for httpx.AsyncClient."""
        if self.timeout is None:
            return {}
        return {"timeout": self.timeout}

    @classmethod
    def from_env(cls) -> MagentoConfig:
        """Create config from environment variables.

        Expected env vars:
        - MAGENTO_CONSUMER_KEY
        - MAGENTO_CONSUMER_SECRET
        - MAGENTO_BASE_URL

        Optional:
        - MAGENTO_REQUEST_TOKEN_URL, MAGENTO_AUTHORIZE_URL, MAGENTO_ACCESS_TOKEN_URL
        - MAGENTO_TIMEOUT
        """
        consumer_key = os.environ.get("MAGENTO_CONSUMER_KEY")
        consumer_secret = os.environ.get("MAGENTO_CONSUMER_SECRET")
        base_url = os.environ.get("MAGENTO_BASE_URL")

        if not consumer_key or not consumer_secret or not base_url:
            msg = (
                "Missing required environment variables: "
                "MAGENTO_CONSUMER_KEY, MAGENTO_CONSUMER_SECRET and MAGENTO_BASE_URL"
            )
            raise ValueError(msg)

        timeout = os.environ.get("MAGENTO_TIMEOUT")

        return cls(
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            base_url=base_url,
            request_token_url=os.environ.get("MAGENTO_REQUEST_TOKEN_URL") or None,
            authorize_url=os.environ.get("MAGENTO_AUTHORIZE_URL") or None,
            access_token_url=os.environ.get("MAGENTO_ACCESS_TOKEN_URL") or None,
            timeout=float(timeout) if timeout else None,
        )

    @classmethod
    def from_file(cls, path: Path | None = None) -> MagentoConfig:
        """Load config from JSON file.

        Default path: ~/.config/magento-access/config.json

        Expected format:
        {
            "consumer_key": "...",
            "consumer_secret": "...",
            "base_url": "https://store.example.com"
        }
        """
        if path is None:
            path = _get_config_dir() / "config.json"

        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with path.open() as f:
            data = json.load(f)

        return cls(
            consumer_key=data["consumer_key"],
            consumer_secret=data["consumer_secret"],
            base_url=data["base_url"],
            request_token_url=data.get("request_token_url"),
            authorize_url=data.get("authorize_url"),
            access_token_url=data.get("access_token_url"),
            timeout=data.get("timeout"),
        )

    @classmethod
    def load(cls) -> MagentoConfig:
        """Load config from environment or file (env takes precedence)."""
        try:
            return cls.from_env()
        except ValueError:
            return cls.from_file()
