"""Magento REST API resource modules."""

from magento_access.api.orders import OrdersAPI
from magento_access.api.products import ProductsAPI
from magento_access.api.results import ApiResult, Empty, Failed, Ok

__all__ = ["ApiResult", "Empty", "Failed", "Ok", "OrdersAPI", "ProductsAPI"]
