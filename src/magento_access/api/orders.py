"""Orders API endpoints."""

from magento_access.api.base import BaseAPI
from magento_access.api.results import ApiResult
from magento_access.models.orders import GetOrdersResponse
from magento_access.parsers.orders import OrdersParser


class OrdersAPI(BaseAPI):
    """Magento sales orders."""

    parser = OrdersParser()

    async def list_orders(self) -> ApiResult[GetOrdersResponse]:
        """List orders visible to the authorized admin user."""
        return await self._invoke("orders", self.parser)

    async def list_orders_raw(self) -> ApiResult[bytes]:
        """Raw XML body of the orders collection."""
        return await self._fetch("orders")
