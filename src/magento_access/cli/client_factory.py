"""Client factory for CLI commands."""

from __future__ import annotations

import webbrowser
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from magento_access.auth import FileVerifierSource, TokenStore
from magento_access.client import MagentoClient

if TYPE_CHECKING:
    from pathlib import Path

    from magento_access.auth.flow import BrowserLauncher
    from magento_access.cli.config import CLIConfig


@asynccontextmanager
async def get_client(
    config: CLIConfig,
    *,
    browser_launcher: BrowserLauncher = webbrowser.open,
    verifier_path: Path | None = None,
) -> AsyncGenerator[MagentoClient, None]:
    """Create and configure a MagentoClient for CLI use.

    This context manager:
    1. Loads store config from the profile file with env var overrides
    2. Uses profile-specific token and verifier files (XDG_DATA_HOME)
       unless verifier_path points elsewhere
    3. Loads any saved token
    4. Manages connection pooling lifecycle

    Usage:
        async with get_client(cli_config) as client:
            result = await client.get_orders()
    """
    client = MagentoClient(
        config.load_config(),
        token_store=TokenStore(path=config.token_path),
        verifier_source=FileVerifierSource(path=verifier_path or config.verifier_path),
        browser_launcher=browser_launcher,
    )
    client.load_token()

    async with client:
        yield client
