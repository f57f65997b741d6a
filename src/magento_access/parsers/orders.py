"""Parser for GET /api/rest/orders."""

import xml.etree.ElementTree as ET

from magento_access.models.orders import (
    GetOrdersResponse,
    Order,
    OrderAddress,
    OrderComment,
    OrderItem,
)
from magento_access.parsers.base import (
    MagentoResponseParser,
    data_items,
    element_decimal,
    element_text,
)

_ORDER_TEXT_FIELDS = {
    "order_id": "entity_id",
    "status": "status",
    "customer_id": "customer_id",
    "store_name": "store_name",
    "created_at": "created_at",
    "payment_method": "payment_method",
    "base_currency_code": "base_currency_code",
    "order_currency_code": "order_currency_code",
}

_ORDER_DECIMAL_FIELDS = (
    "base_discount_amount",
    "base_grand_total",
    "base_shipping_amount",
    "base_shipping_tax_amount",
    "base_subtotal",
    "base_tax_amount",
    "base_total_paid",
    "base_total_refunded",
    "base_shipping_discount_amount",
    "base_subtotal_incl_tax",
    "base_total_due",
    "discount_amount",
    "grand_total",
    "shipping_amount",
    "shipping_tax_amount",
    "shipping_discount_amount",
    "shipping_incl_tax",
    "store_to_order_rate",
    "subtotal",
    "subtotal_incl_tax",
    "tax_amount",
    "total_paid",
    "total_refunded",
    "total_due",
)

_ADDRESS_FIELDS = (
    "address_type",
    "prefix",
    "firstname",
    "middlename",
    "lastname",
    "suffix",
    "company",
    "street",
    "city",
    "region",
    "postcode",
    "country_id",
    "email",
    "telephone",
)

_ITEM_TEXT_FIELDS = ("item_id", "parent_item_id", "sku", "name")

_ITEM_DECIMAL_FIELDS = (
    "qty_canceled",
    "qty_invoiced",
    "qty_ordered",
    "qty_refunded",
    "qty_shipped",
    "price",
    "base_price",
    "original_price",
    "base_original_price",
    "tax_percent",
    "tax_amount",
    "base_tax_amount",
    "discount_amount",
    "base_discount_amount",
    "row_total",
    "base_row_total",
    "price_incl_tax",
    "base_price_incl_tax",
    "row_total_incl_tax",
    "base_row_total_incl_tax",
)

_COMMENT_FIELDS = ("comment", "status", "is_customer_notified", "is_visible_on_front")


class OrdersParser(MagentoResponseParser[GetOrdersResponse]):
    """Maps the orders collection to GetOrdersResponse."""

    resource = "orders"

    def parse_root(self, root: ET.Element) -> GetOrdersResponse:
        return GetOrdersResponse(orders=[self._parse_order(node) for node in data_items(root)])

    def _parse_order(self, node: ET.Element) -> Order:
        fields: dict[str, object] = {
            name: element_text(node, tag) for name, tag in _ORDER_TEXT_FIELDS.items()
        }
        fields.update({name: element_decimal(node, name) for name in _ORDER_DECIMAL_FIELDS})

        return Order(
            **fields,
            addresses=[
                OrderAddress(**{f: element_text(a, f) for f in _ADDRESS_FIELDS})
                for a in data_items(node.find("addresses"))
            ],
            items=[self._parse_item(i) for i in data_items(node.find("order_items"))],
            comments=[
                OrderComment(**{f: element_text(c, f) for f in _COMMENT_FIELDS})
                for c in data_items(node.find("order_comments"))
            ],
        )

    def _parse_item(self, node: ET.Element) -> OrderItem:
        fields: dict[str, object] = {name: element_text(node, name) for name in _ITEM_TEXT_FIELDS}
        fields.update({name: element_decimal(node, name) for name in _ITEM_DECIMAL_FIELDS})
        return OrderItem(**fields)
