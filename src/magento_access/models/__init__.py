"""Pydantic models for Magento REST API responses."""

from magento_access.models.auth import AccessToken, RequestToken
from magento_access.models.orders import (
    GetOrdersResponse,
    Order,
    OrderAddress,
    OrderComment,
    OrderItem,
)
from magento_access.models.products import (
    GetProductResponse,
    GetProductsResponse,
    Product,
    StockData,
)

__all__ = [
    # Auth
    "AccessToken",
    "RequestToken",
    # Order models
    "GetOrdersResponse",
    "Order",
    "OrderAddress",
    "OrderComment",
    "OrderItem",
    # Product models
    "GetProductResponse",
    "GetProductsResponse",
    "Product",
    "StockData",
]
