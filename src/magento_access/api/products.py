"""Products API endpoints."""

from magento_access.api.base import BaseAPI
from magento_access.api.results import ApiResult
from magento_access.exceptions import MagentoValidationError
from magento_access.models.products import GetProductResponse, GetProductsResponse
from magento_access.parsers.products import ProductParser, ProductsParser


class ProductsAPI(BaseAPI):
    """Magento catalog products."""

    list_parser = ProductsParser()
    item_parser = ProductParser()

    async def list_products(self) -> ApiResult[GetProductsResponse]:
        """List catalog products."""
        return await self._invoke("products", self.list_parser)

    async def get_product(self, product_id: str | int) -> ApiResult[GetProductResponse]:
        """Get a single product by entity id.

        Raises:
            MagentoValidationError: If product_id is blank
        """
        product_id = str(product_id).strip()
        if not product_id:
            raise MagentoValidationError("Product id must not be empty", field="product_id")

        return await self._invoke(f"products/{product_id}", self.item_parser)
