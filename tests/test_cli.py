"""Tests for the magento-cli commands that need no live store."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from magento_access.auth import FileVerifierSource, TokenStore
from magento_access.cli import app
from magento_access.models.auth import AccessToken

runner = CliRunner()


@pytest.fixture
def dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    monkeypatch.setenv("MAGENTO_CLI_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("MAGENTO_CLI_DATA_DIR", str(data_dir))
    monkeypatch.setenv("MAGENTO_CONSUMER_KEY", "key")
    monkeypatch.setenv("MAGENTO_CONSUMER_SECRET", "secret")
    monkeypatch.setenv("MAGENTO_BASE_URL", "http://store.test")
    return config_dir, data_dir


class TestAuthCommands:
    """Tests for the auth sub-commands."""

    def test_verifier_writes_handoff_file(self, dirs: tuple[Path, Path]) -> None:
        _, data_dir = dirs

        result = runner.invoke(app, ["auth", "verifier", "abc123"])

        assert result.exit_code == 0
        assert FileVerifierSource(data_dir / "default-verifier.csv").read() == "abc123"

    def test_verifier_uses_profile(self, dirs: tuple[Path, Path]) -> None:
        _, data_dir = dirs

        result = runner.invoke(app, ["--profile", "shop2", "auth", "verifier", "xyz"])

        assert result.exit_code == 0
        assert (data_dir / "shop2-verifier.csv").exists()

    def test_blank_verifier_rejected(self, dirs: tuple[Path, Path]) -> None:
        _, data_dir = dirs

        result = runner.invoke(app, ["auth", "verifier", "  "])

        assert result.exit_code == 1
        assert not (data_dir / "default-verifier.csv").exists()

    def test_status_without_token(self, dirs: tuple[Path, Path]) -> None:
        result = runner.invoke(app, ["auth", "status"])

        assert result.exit_code == 0

    def test_logout_clears_token(self, dirs: tuple[Path, Path]) -> None:
        _, data_dir = dirs
        store = TokenStore(path=data_dir / "default-token.json")
        store.save(AccessToken(token="tok", token_secret="sec"))

        result = runner.invoke(app, ["auth", "logout"])

        assert result.exit_code == 0
        assert not store.has_token()


class TestResourceCommands:
    """Resource commands refuse to run without a saved token."""

    @pytest.mark.parametrize(
        "args",
        [["orders", "list"], ["products", "list"], ["products", "get", "7"]],
    )
    def test_requires_authentication(self, dirs: tuple[Path, Path], args: list[str]) -> None:
        result = runner.invoke(app, args)

        assert result.exit_code == 1
