"""XML response parsers."""

from magento_access.parsers.base import MagentoResponseParser
from magento_access.parsers.orders import OrdersParser
from magento_access.parsers.products import ProductParser, ProductsParser

__all__ = ["MagentoResponseParser", "OrdersParser", "ProductParser", "ProductsParser"]
