"""Tests for the in-memory token manager and on-disk token store."""

import json
from pathlib import Path

import pytest

from magento_access.auth.tokens import TokenManager, TokenStore
from magento_access.exceptions import MagentoAuthError, MagentoTokenError
from magento_access.models.auth import AccessToken


class TestTokenManager:
    """Tests for TokenManager."""

    def test_put_and_lookup(self) -> None:
        manager = TokenManager()
        manager.put("token", "secret")

        assert manager.secret_for("token") == "secret"
        assert "token" in manager
        assert len(manager) == 1

    def test_unknown_token_raises(self) -> None:
        """Lookup of an unknown token should raise MagentoTokenError."""
        manager = TokenManager()

        with pytest.raises(MagentoTokenError) as exc_info:
            manager.secret_for("missing")

        assert exc_info.value.token == "missing"

    def test_token_error_is_auth_error(self) -> None:
        with pytest.raises(MagentoAuthError):
            TokenManager().secret_for("missing")

    def test_set_consumer(self) -> None:
        manager = TokenManager()
        manager.set_consumer("key", "secret")

        assert manager.consumer_key == "key"
        assert manager.consumer_secret == "secret"

    def test_discard(self) -> None:
        manager = TokenManager()
        manager.put("token", "secret")
        manager.discard("token")
        manager.discard("never-added")

        assert "token" not in manager

    def test_instances_are_isolated(self) -> None:
        """Two managers should never share tokens."""
        first = TokenManager()
        second = TokenManager()
        first.put("token", "secret")

        assert "token" not in second


class TestTokenStore:
    """Tests for TokenStore persistence."""

    def test_save_and_load(self, tmp_path: Path) -> None:
        store = TokenStore(path=tmp_path / "tokens" / "token.json")
        store.save(AccessToken(token="tok", token_secret="sec"))

        loaded = store.load()

        assert loaded == AccessToken(token="tok", token_secret="sec")
        assert store.has_token()

    def test_file_is_private(self, tmp_path: Path) -> None:
        store = TokenStore(path=tmp_path / "token.json")
        store.save(AccessToken(token="tok", token_secret="sec"))

        assert (store.path.stat().st_mode & 0o777) == 0o600

    def test_load_missing_returns_none(self, tmp_path: Path) -> None:
        assert TokenStore(path=tmp_path / "absent.json").load() is None

    def test_load_corrupt_returns_none(self, tmp_path: Path) -> None:
        path = tmp_path / "token.json"
        path.write_text("{not json")

        assert TokenStore(path=path).load() is None

    def test_load_blank_token_returns_none(self, tmp_path: Path) -> None:
        """A half-empty pair on disk must not produce an AccessToken."""
        path = tmp_path / "token.json"
        path.write_text(json.dumps({"token": "tok", "token_secret": ""}))

        assert TokenStore(path=path).load() is None

    def test_clear(self, tmp_path: Path) -> None:
        store = TokenStore(path=tmp_path / "token.json")
        store.save(AccessToken(token="tok", token_secret="sec"))
        store.clear()

        assert not store.has_token()
        store.clear()  # no-op when already gone

    def test_default_path_uses_xdg_data_home(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

        assert TokenStore().path == tmp_path / "magento-access" / "tokens.json"
