"""Magento REST API client library.

OAuth 1.0a authorization plus typed access to orders and products.

Example:
    from magento_access import MagentoClient, MagentoConfig, Ok

    config = MagentoConfig(
        consumer_key="your_key",
        consumer_secret="your_secret",
        base_url="https://store.example.com",
    )

    async with MagentoClient(config) as client:
        # First time: opens the browser and waits for the verifier code,
        # e.g. written with `magento-cli auth verifier CODE`
        if not client.load_token():
            await client.authorize()
            client.save_token()

        result = await client.get_orders()
        if isinstance(result, Ok):
            for order in result.value.orders:
                print(order.order_id, order.grand_total)
"""

from magento_access.api.results import ApiResult, Empty, Failed, Ok
from magento_access.client import MagentoClient
from magento_access.config import MagentoConfig
from magento_access.exceptions import (
    MagentoAuthError,
    MagentoError,
    MagentoParseError,
    MagentoTokenError,
    MagentoTransportError,
    MagentoValidationError,
    VerifierTimeoutError,
)
from magento_access.models.auth import AccessToken, RequestToken

__version__ = "0.1.0"

__all__ = [
    # Main client
    "MagentoClient",
    "MagentoConfig",
    # Tokens
    "AccessToken",
    "RequestToken",
    # Results
    "ApiResult",
    "Empty",
    "Failed",
    "Ok",
    # Exceptions
    "MagentoAuthError",
    "MagentoError",
    "MagentoParseError",
    "MagentoTokenError",
    "MagentoTransportError",
    "MagentoValidationError",
    "VerifierTimeoutError",
]
