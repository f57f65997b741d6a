"""Three-legged OAuth 1.0a handshake against a Magento store."""

from __future__ import annotations

import asyncio
import logging
import subprocess
import webbrowser
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, urlencode

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_fixed,
)

from magento_access.exceptions import MagentoAuthError, VerifierTimeoutError
from magento_access.models.auth import AccessToken, RequestToken

if TYPE_CHECKING:
    from magento_access.auth.oauth import OAuthSigner
    from magento_access.auth.tokens import TokenManager
    from magento_access.auth.verifier import VerifierSource
    from magento_access.config import MagentoConfig

logger = logging.getLogger(__name__)

BrowserLauncher = Callable[[str], Any]
"""Opens the authorization URL. May return a process handle with terminate()."""


def command_launcher(command: Sequence[str]) -> BrowserLauncher:
    """Launcher that runs ``command`` with the URL appended as last argument.

    The returned subprocess.Popen handle is terminated by the flow if the
    handshake is cancelled or times out.
    """

    def launch(url: str) -> subprocess.Popen[bytes]:
        return subprocess.Popen([*command, url])

    return launch


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _terminate(handle: Any) -> None:
    terminate = getattr(handle, "terminate", None)
    if callable(terminate):
        logger.debug("Terminating browser process")
        terminate()


class AuthorizationFlow:
    """Drives the request token -> browser approval -> access token handshake.

    1. POST a signed request for a request token (oauth_callback=oob)
    2. Open the authorization URL through the injected launcher
    3. Poll the verifier source until a code appears or attempts run out
    4. Exchange request token + verifier for an access token
    5. Register the access token with the TokenManager
    """

    def __init__(
        self,
        config: MagentoConfig,
        token_manager: TokenManager,
        signer: OAuthSigner,
        verifier_source: VerifierSource,
        *,
        browser_launcher: BrowserLauncher = webbrowser.open,
        http_client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.config = config
        self.token_manager = token_manager
        self.signer = signer
        self.verifier_source = verifier_source
        self._launch = browser_launcher
        self._http_client = http_client
        self._sleep = sleep

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    async def authorize(self) -> AccessToken:
        """Run the full handshake.

        Returns:
            The access token, already registered with the TokenManager

        Raises:
            MagentoAuthError: If either token exchange fails or the
                authorization URL cannot be opened
            VerifierTimeoutError: If no verifier arrives within the polling bound
        """
        request_token = await self.get_request_token()
        try:
            self.verifier_source.clear()

            logger.info("Waiting for store owner approval at %s", request_token.authorization_url)
            try:
                handle = self._launch(request_token.authorization_url)
            except (OSError, webbrowser.Error) as e:
                msg = f"Could not open the authorization URL: {e}"
                raise MagentoAuthError(msg, stage="authorize") from e

            try:
                verifier = await self.wait_for_verifier()
            except (asyncio.CancelledError, VerifierTimeoutError):
                _terminate(handle)
                raise

            return await self.get_access_token(request_token, verifier)
        finally:
            self.token_manager.discard(request_token.token)

    async def get_request_token(self) -> RequestToken:
        """Step 1: Get a request token and the URL the user must approve it at."""
        url = self.config.request_token_endpoint
        headers = self.signer.authorization_headers(
            "POST",
            url,
            extra_oauth_params={"oauth_callback": "oob"},
        )

        token, token_secret = await self._exchange(url, headers, stage="request_token")
        self.token_manager.put(token, token_secret)

        return RequestToken(
            token=token,
            token_secret=token_secret,
            authorization_url=self.authorization_url(token),
        )

    def authorization_url(self, request_token: str) -> str:
        """User authorization URL for ``request_token``."""
        base = self.config.authorize_endpoint
        separator = "&" if "?" in base else "?"
        return f"{base}{separator}{urlencode({'oauth_token': request_token})}"

    async def wait_for_verifier(self) -> str:
        """Step 3: Poll the verifier source.

        Read errors and blank values are retried every
        ``verifier_poll_interval`` seconds for at most
        ``verifier_max_attempts`` reads.
        """
        max_attempts = self.config.verifier_max_attempts
        retrying = AsyncRetrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait_fixed(self.config.verifier_poll_interval),
            retry=retry_if_exception_type(Exception) | retry_if_result(_is_blank),
            before_sleep=before_sleep_log(logger, logging.DEBUG),
            sleep=self._sleep,
        )

        try:
            verifier: str = await retrying(self._read_verifier)
        except RetryError:
            msg = f"No verifier code received after {max_attempts} attempts"
            raise VerifierTimeoutError(msg, attempts=max_attempts) from None

        return verifier.strip()

    async def _read_verifier(self) -> str | None:
        return await asyncio.to_thread(self.verifier_source.read)

    async def get_access_token(self, request_token: RequestToken, verifier: str) -> AccessToken:
        """Step 4: Exchange the approved request token for an access token."""
        if _is_blank(verifier):
            raise MagentoAuthError("Verifier code is empty", stage="access_token")

        url = self.config.access_token_endpoint
        headers = self.signer.authorization_headers(
            "POST",
            url,
            token=request_token.token,
            extra_oauth_params={"oauth_verifier": verifier},
        )

        token, token_secret = await self._exchange(url, headers, stage="access_token")

        access_token = AccessToken(token=token, token_secret=token_secret)
        self.token_manager.put(access_token.token, access_token.token_secret)
        self.token_manager.discard(request_token.token)

        return access_token

    async def _exchange(self, url: str, headers: dict[str, str], *, stage: str) -> tuple[str, str]:
        """POST to a token endpoint and parse the form-encoded token pair."""
        logger.debug("Token request: POST %s", url)

        try:
            if self._http_client is not None:
                response = await self._http_client.post(url, headers=headers)
            else:
                async with httpx.AsyncClient(**self.config.http_client_options()) as client:
                    response = await client.post(url, headers=headers)
        except httpx.HTTPError as e:
            raise MagentoAuthError(f"Token request to {url} failed: {e}", stage=stage) from e

        if response.status_code != 200:
            raise MagentoAuthError(
                f"Token request failed: {response.status_code} {response.text}",
                stage=stage,
            )

        data = parse_qs(response.text)
        token = data.get("oauth_token", [""])[0]
        token_secret = data.get("oauth_token_secret", [""])[0]

        if not token or not token_secret:
            raise MagentoAuthError(f"Invalid {stage} response", stage=stage)

        return token, token_secret
