"""Main Magento client."""

from __future__ import annotations

import webbrowser
from typing import TYPE_CHECKING

import httpx

from magento_access.api.orders import OrdersAPI
from magento_access.api.products import ProductsAPI
from magento_access.auth import (
    AuthorizationFlow,
    FileVerifierSource,
    OAuthSigner,
    TokenManager,
    TokenStore,
)
from magento_access.config import MagentoConfig
from magento_access.models.auth import AccessToken

if TYPE_CHECKING:
    from types import TracebackType

    from magento_access.api.results import ApiResult
    from magento_access.auth.flow import BrowserLauncher
    from magento_access.auth.verifier import VerifierSource
    from magento_access.models.orders import GetOrdersResponse
    from magento_access.models.products import GetProductResponse, GetProductsResponse


class MagentoClient:
    """Magento REST API session.

    Holds the consumer credentials and, once authorized, the access token
    pair used to sign every resource call.

    Usage (first run - interactive authorization):
        async with MagentoClient(config) as client:
            await client.authorize()
            client.save_token()
            result = await client.get_orders()

    Usage (existing access token):
        client = MagentoClient(
            config,
            access_token=AccessToken(token="...", token_secret="..."),
        )
        result = await client.get_products()

    Resource calls return ``Ok``, ``Empty`` or ``Failed`` instead of
    raising on transport errors; always check the result type.
    """

    def __init__(
        self,
        config: MagentoConfig,
        *,
        access_token: AccessToken | None = None,
        token_manager: TokenManager | None = None,
        token_store: TokenStore | None = None,
        verifier_source: VerifierSource | None = None,
        browser_launcher: BrowserLauncher = webbrowser.open,
        http_client: httpx.AsyncClient | None = None,
        signer: OAuthSigner | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Store configuration with credentials and endpoints
            access_token: Optional access token pair from an earlier handshake
            token_manager: Optional token manager (a fresh one if not provided)
            token_store: Optional token persistence (uses default path if not provided)
            verifier_source: Where authorize() polls for the verifier code
            browser_launcher: Opens the authorization URL during authorize()
            http_client: Optional httpx.AsyncClient for connection pooling.
                        If provided, the client will use this pool and NOT close it.
            signer: Optional pre-built signer (tests inject nonce/clock this way)
        """
        self.config = config
        self.token_store = token_store or TokenStore()

        if token_manager is None:
            token_manager = signer.token_manager if signer is not None else TokenManager()
        self.token_manager = token_manager
        self.token_manager.set_consumer(config.consumer_key, config.consumer_secret)
        self.signer = signer or OAuthSigner(config, self.token_manager)

        self._access_token: AccessToken | None = None
        if access_token is not None:
            self.set_access_token(access_token.token, access_token.token_secret)

        self.flow = AuthorizationFlow(
            config,
            self.token_manager,
            self.signer,
            verifier_source or FileVerifierSource(),
            browser_launcher=browser_launcher,
            http_client=http_client,
        )

        # HTTP client management
        self._http_client = http_client
        self._owns_http_client = http_client is None

        self.orders = OrdersAPI(config, self.signer, lambda: self._access_token, http_client)
        self.products = ProductsAPI(config, self.signer, lambda: self._access_token, http_client)

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Update HTTP client on the flow and all API modules."""
        self._http_client = http_client
        self.flow.set_http_client(http_client)
        self.orders.set_http_client(http_client)
        self.products.set_http_client(http_client)

    async def open(self) -> None:
        """Open connection pool for HTTP requests."""
        if self._http_client is None and self._owns_http_client:
            self._set_http_client(httpx.AsyncClient(**self.config.http_client_options()))

    async def close(self) -> None:
        """Close connection pool (only if this client owns it)."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> MagentoClient:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    @classmethod
    def from_env(cls) -> MagentoClient:
        """Create client from MAGENTO_* environment variables."""
        return cls(MagentoConfig.from_env())

    @property
    def is_authenticated(self) -> bool:
        """Check if the client holds an access token pair."""
        return self._access_token is not None

    @property
    def access_token(self) -> AccessToken | None:
        """Current access token pair, if authenticated."""
        return self._access_token

    def set_access_token(self, token: str, token_secret: str) -> None:
        """Install an access token pair obtained elsewhere.

        The pair is validated before anything changes, so the client is
        never left half-authenticated.
        """
        access_token = AccessToken(token=token, token_secret=token_secret)
        if self._access_token is not None:
            self.token_manager.discard(self._access_token.token)
        self.token_manager.put(access_token.token, access_token.token_secret)
        self._access_token = access_token

    async def authorize(self) -> AccessToken:
        """Run the interactive OAuth handshake and install the access token.

        Raises:
            MagentoAuthError: If a token exchange fails
            VerifierTimeoutError: If the verifier never shows up
        """
        access_token = await self.flow.authorize()
        self.set_access_token(access_token.token, access_token.token_secret)
        return access_token

    def load_token(self) -> bool:
        """Load saved access token.

        Returns:
            True if token was loaded, False if no token saved
        """
        token = self.token_store.load()
        if token:
            self.set_access_token(token.token, token.token_secret)
            return True
        return False

    def save_token(self) -> None:
        """Save current access token."""
        if self._access_token:
            self.token_store.save(self._access_token)

    def clear_token(self) -> None:
        """Forget the access token in memory and on disk."""
        if self._access_token is not None:
            self.token_manager.discard(self._access_token.token)
        self._access_token = None
        self.token_store.clear()

    async def get_orders(self) -> ApiResult[GetOrdersResponse]:
        """GET /api/rest/orders."""
        return await self.orders.list_orders()

    async def get_products(self) -> ApiResult[GetProductsResponse]:
        """GET /api/rest/products."""
        return await self.products.list_products()

    async def get_product(self, product_id: str | int) -> ApiResult[GetProductResponse]:
        """GET /api/rest/products/{product_id}."""
        return await self.products.get_product(product_id)
