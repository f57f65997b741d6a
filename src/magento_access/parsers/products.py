"""Parsers for GET /api/rest/products and /api/rest/products/{id}."""

import xml.etree.ElementTree as ET

from magento_access.models.products import (
    GetProductResponse,
    GetProductsResponse,
    Product,
    StockData,
)
from magento_access.parsers.base import (
    MagentoResponseParser,
    data_items,
    element_bool,
    element_decimal,
    element_text,
)


def _parse_stock(node: ET.Element | None) -> StockData | None:
    if node is None:
        return None
    return StockData(
        qty=element_decimal(node, "qty"),
        is_in_stock=element_bool(node, "is_in_stock"),
        manage_stock=element_bool(node, "manage_stock"),
        min_qty=element_decimal(node, "min_qty"),
    )


class ProductsParser(MagentoResponseParser[GetProductsResponse]):
    """Maps the product collection to GetProductsResponse."""

    resource = "products"

    def parse_root(self, root: ET.Element) -> GetProductsResponse:
        products = [
            Product(
                entity_id=element_text(node, "entity_id"),
                type_id=element_text(node, "type_id"),
                sku=element_text(node, "sku"),
                name=element_text(node, "name"),
                price=element_decimal(node, "price"),
                description=element_text(node, "description"),
            )
            for node in data_items(root)
        ]
        return GetProductsResponse(products=products)


class ProductParser(MagentoResponseParser[GetProductResponse]):
    """Maps a single product document to GetProductResponse."""

    resource = "product"

    def parse_root(self, root: ET.Element) -> GetProductResponse:
        return GetProductResponse(
            entity_id=element_text(root, "entity_id"),
            sku=element_text(root, "sku"),
            name=element_text(root, "name"),
            price=element_decimal(root, "price"),
            description=element_text(root, "description"),
            stock_data=_parse_stock(root.find("stock_data")),
        )
