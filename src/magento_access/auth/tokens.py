"""Token bookkeeping and persistence."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from magento_access.exceptions import MagentoTokenError
from magento_access.models.auth import AccessToken

logger = logging.getLogger(__name__)


def _get_token_path() -> Path:
    """Get default token storage path."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return base / "magento-access" / "tokens.json"


class TokenManager:
    """In-memory map of issued tokens to their secrets for one consumer.

    Written during the handshake and read when signing. Each client owns
    its own instance.
    """

    def __init__(self, consumer_key: str = "", consumer_secret: str = "") -> None:
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self._secrets: dict[str, str] = {}

    def set_consumer(self, consumer_key: str, consumer_secret: str) -> None:
        """Bind the manager to a consumer key/secret pair."""
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret

    def put(self, token: str, token_secret: str) -> None:
        """Remember the secret issued for ``token``."""
        self._secrets[token] = token_secret

    def secret_for(self, token: str) -> str:
        """Look up the secret for ``token``.

        Raises:
            MagentoTokenError: If the token was never issued to this manager
        """
        try:
            return self._secrets[token]
        except KeyError:
            raise MagentoTokenError(f"Unknown token: {token}", token=token) from None

    def discard(self, token: str) -> None:
        """Forget ``token`` if known."""
        self._secrets.pop(token, None)

    def __contains__(self, token: object) -> bool:
        return token in self._secrets

    def __len__(self) -> int:
        return len(self._secrets)


@dataclass
class TokenStore:
    """Persistent storage for the access token pair.

    Stores tokens in a JSON file. For production use, consider
    encrypting the file or using a secrets manager.
    """

    path: Path

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or _get_token_path()

    def save(self, token: AccessToken) -> None:
        """Save access token to storage."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "token": token.token,
            "token_secret": token.token_secret,
        }

        with self.path.open("w") as f:
            json.dump(data, f, indent=2)

        # Owner read/write only
        self.path.chmod(0o600)
        logger.debug("Saved access token to %s", self.path)

    def load(self) -> AccessToken | None:
        """Load access token from storage.

        Returns None if no token is stored, the file doesn't exist,
        or its contents are unusable.
        """
        if not self.path.exists():
            return None

        try:
            with self.path.open() as f:
                data = json.load(f)
            return AccessToken(
                token=data["token"],
                token_secret=data["token_secret"],
            )
        except (json.JSONDecodeError, KeyError, ValueError):
            logger.warning("Ignoring unreadable token file %s", self.path)
            return None

    def clear(self) -> None:
        """Remove stored token."""
        if self.path.exists():
            self.path.unlink()

    def has_token(self) -> bool:
        """Check if a token is stored."""
        return self.path.exists()
