"""CLI configuration with XDG-compliant paths and environment variable overrides."""

import json
import logging
import os
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from magento_access.config import MagentoConfig

logger = logging.getLogger(__name__)


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def _default_config_dir() -> Path:
    """Get XDG-compliant config directory for credentials.

    Uses XDG_CONFIG_HOME if set, otherwise ~/.config/magento-cli.
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "magento-cli"
    return Path.home() / ".config" / "magento-cli"


def _default_data_dir() -> Path:
    """Get XDG-compliant data directory for tokens.

    Uses XDG_DATA_HOME if set, otherwise ~/.local/share/magento-cli.
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / "magento-cli"
    return Path.home() / ".local" / "share" / "magento-cli"


_ENV_OVERRIDES = {
    "consumer_key": "MAGENTO_CONSUMER_KEY",
    "consumer_secret": "MAGENTO_CONSUMER_SECRET",
    "base_url": "MAGENTO_BASE_URL",
    "request_token_url": "MAGENTO_REQUEST_TOKEN_URL",
    "authorize_url": "MAGENTO_AUTHORIZE_URL",
    "access_token_url": "MAGENTO_ACCESS_TOKEN_URL",
}


@dataclass
class CLIConfig:
    """Configuration passed through Typer context.

    Directory Structure:
        config_dir/
        └── {profile}.json            # Store credentials and endpoints

        data_dir/
        ├── {profile}-token.json      # OAuth access token
        └── {profile}-verifier.csv    # Verifier code handoff file
    """

    profile: str = "default"
    verbose: bool = False
    config_dir: Path = field(default_factory=_default_config_dir)
    data_dir: Path = field(default_factory=_default_data_dir)

    @property
    def token_path(self) -> Path:
        return self.data_dir / f"{self.profile}-token.json"

    @property
    def verifier_path(self) -> Path:
        return self.data_dir / f"{self.profile}-verifier.csv"

    @property
    def credentials_path(self) -> Path:
        return self.config_dir / f"{self.profile}.json"

    def load_config(self) -> MagentoConfig:
        """Load store config from the profile file with environment overrides.

        Loading priority:
        1. Profile config file ({profile}.json)
        2. MAGENTO_* environment variables override individual values

        Raises:
            ValueError: If credentials or the store URL cannot be determined
        """
        data: dict[str, str] = {}

        if self.credentials_path.exists():
            try:
                with self.credentials_path.open() as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Failed to read %s: %s", self.credentials_path, e)

        for key, env_var in _ENV_OVERRIDES.items():
            if value := os.environ.get(env_var):
                data[key] = value

        missing = [k for k in ("consumer_key", "consumer_secret", "base_url") if not data.get(k)]
        if missing:
            msg = (
                f"Missing configuration: {', '.join(missing)}. "
                f"Set via environment variables (MAGENTO_CONSUMER_KEY, MAGENTO_CONSUMER_SECRET, "
                f"MAGENTO_BASE_URL) or create config file at {self.credentials_path}"
            )
            raise ValueError(msg)

        return MagentoConfig(
            consumer_key=data["consumer_key"],
            consumer_secret=data["consumer_secret"],
            base_url=data["base_url"],
            request_token_url=data.get("request_token_url"),
            authorize_url=data.get("authorize_url"),
            access_token_url=data.get("access_token_url"),
        )
