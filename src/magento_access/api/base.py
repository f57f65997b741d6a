"""Base API client with common functionality."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

import httpx

from magento_access.api.results import ApiResult, Empty, Failed, Ok
from magento_access.exceptions import MagentoTokenError, MagentoTransportError

if TYPE_CHECKING:
    from magento_access.auth.oauth import OAuthSigner
    from magento_access.config import MagentoConfig
    from magento_access.models.auth import AccessToken
    from magento_access.parsers.base import MagentoResponseParser

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseAPI:
    """Base class for Magento REST resources.

    Signs every GET with the current access token, executes it, and hands
    the body to a parser. Transport failures are logged and returned as
    ``Failed``; parse errors propagate.
    """

    def __init__(
        self,
        config: MagentoConfig,
        signer: OAuthSigner,
        token_provider: Callable[[], AccessToken | None],
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.signer = signer
        self._token_provider = token_provider
        self._http_client = http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    def _sign(self, resource_path: str) -> httpx.Request:
        access_token = self._token_provider()
        if access_token is None:
            raise MagentoTokenError("Not authenticated. Complete the OAuth flow first.")
        return self.signer.sign("GET", resource_path, access_token.token)

    async def _fetch(self, resource_path: str) -> ApiResult[bytes]:
        """Execute a signed GET and return the raw body.

        Args:
            resource_path: Path below the REST root (e.g. "orders")

        Returns:
            Ok(body), Empty() for a blank body, or Failed(reason)
        """
        request = self._sign(resource_path)
        logger.debug("Request: %s %s", request.method, request.url)

        try:
            if self._http_client is not None:
                response = await self._http_client.send(request)
            else:
                async with httpx.AsyncClient(**self.config.http_client_options()) as client:
                    response = await client.send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = MagentoTransportError(
                f"{resource_path}: HTTP {e.response.status_code}",
                url=str(request.url),
                status_code=e.response.status_code,
            )
            logger.warning("Request to %s failed: %s", request.url, error.message)
            return Failed(error.message, error)
        except httpx.HTTPError as e:
            error = MagentoTransportError(f"{resource_path}: {e}", url=str(request.url))
            logger.warning("Request to %s failed: %s", request.url, error.message)
            return Failed(error.message, error)

        if not response.content.strip():
            logger.debug("Empty response body from %s", request.url)
            return Empty()

        return Ok(response.content)

    async def _invoke(self, resource_path: str, parser: MagentoResponseParser[T]) -> ApiResult[T]:
        """Fetch ``resource_path`` and parse the body with ``parser``."""
        result = await self._fetch(resource_path)
        if not isinstance(result, Ok):
            return result

        with io.BytesIO(result.value) as stream:
            return Ok(parser.parse(stream, keep_stream_position=False))
