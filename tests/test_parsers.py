"""Tests for the Magento XML response parsers."""

import io
from decimal import Decimal

import pytest

from magento_access.exceptions import MagentoParseError
from magento_access.parsers import OrdersParser, ProductParser, ProductsParser

ORDERS_XML = """<?xml version="1.0"?>
<magento_api>
  <data_item>
    <entity_id>100</entity_id>
    <status>processing</status>
    <customer_id>42</customer_id>
    <store_name>Main Website</store_name>
    <created_at>2014-01-15 10:22:01</created_at>
    <payment_method>checkmo</payment_method>
    <base_currency_code>USD</base_currency_code>
    <order_currency_code>USD</order_currency_code>
    <base_grand_total>120.5000</base_grand_total>
    <grand_total>120,50</grand_total>
    <shipping_amount>5.0000</shipping_amount>
    <discount_amount></discount_amount>
    <addresses>
      <data_item>
        <address_type>billing</address_type>
        <firstname>Jane</firstname>
        <lastname>Doe</lastname>
        <street>1 Main St</street>
        <city>Springfield</city>
        <postcode>12345</postcode>
        <country_id>US</country_id>
      </data_item>
      <data_item>
        <address_type>shipping</address_type>
        <city>Shelbyville</city>
      </data_item>
    </addresses>
    <order_items>
      <data_item>
        <item_id>7</item_id>
        <sku>SKU-7</sku>
        <name>Widget</name>
        <qty_ordered>2.0000</qty_ordered>
        <price>57.7500</price>
        <row_total>115.5000</row_total>
      </data_item>
    </order_items>
    <order_comments>
      <data_item>
        <comment>Shipped today</comment>
        <status>processing</status>
        <is_customer_notified>1</is_customer_notified>
      </data_item>
    </order_comments>
  </data_item>
  <data_item>
    <entity_id>101</entity_id>
    <status>pending</status>
  </data_item>
</magento_api>
""".encode()

PRODUCTS_XML = b"""<?xml version="1.0"?>
<magento_api>
  <data_item>
    <entity_id>1</entity_id>
    <type_id>simple</type_id>
    <sku>SKU-1</sku>
    <name>First</name>
    <price>10.0000</price>
  </data_item>
  <data_item>
    <entity_id>2</entity_id>
    <sku>SKU-2</sku>
    <description>Second product</description>
  </data_item>
</magento_api>
"""

PRODUCT_XML = """<?xml version="1.0"?>
<magento_api>
  <entity_id>16</entity_id>
  <sku>café-mug</sku>
  <name>Café Mug</name>
  <price>12.5000</price>
  <description>Ceramic</description>
  <stock_data>
    <qty>99.0000</qty>
    <is_in_stock>1</is_in_stock>
    <manage_stock>0</manage_stock>
  </stock_data>
</magento_api>
""".encode()


class TestOrdersParser:
    """Tests for OrdersParser."""

    def test_parses_orders(self) -> None:
        response = OrdersParser().parse(io.BytesIO(ORDERS_XML))

        assert [o.order_id for o in response.orders] == ["100", "101"]

        order = response.orders[0]
        assert order.status == "processing"
        assert order.customer_id == "42"
        assert order.store_name == "Main Website"
        assert order.payment_method == "checkmo"
        assert order.base_currency_code == "USD"
        assert order.base_grand_total == Decimal("120.5000")
        assert order.shipping_amount == Decimal("5.0000")

    def test_comma_decimal_separator(self) -> None:
        order = OrdersParser().parse(io.BytesIO(ORDERS_XML)).orders[0]

        assert order.grand_total == Decimal("120.50")

    def test_blank_amount_is_none(self) -> None:
        order = OrdersParser().parse(io.BytesIO(ORDERS_XML)).orders[0]

        assert order.discount_amount is None

    def test_addresses(self) -> None:
        order = OrdersParser().parse(io.BytesIO(ORDERS_XML)).orders[0]

        billing, shipping = order.addresses
        assert billing.address_type == "billing"
        assert billing.firstname == "Jane"
        assert billing.street == "1 Main St"
        assert billing.country_id == "US"
        assert shipping.city == "Shelbyville"
        assert shipping.firstname is None

    def test_items(self) -> None:
        item = OrdersParser().parse(io.BytesIO(ORDERS_XML)).orders[0].items[0]

        assert item.item_id == "7"
        assert item.sku == "SKU-7"
        assert item.qty_ordered == Decimal("2.0000")
        assert item.price == Decimal("57.7500")
        assert item.row_total == Decimal("115.5000")

    def test_comments(self) -> None:
        comment = OrdersParser().parse(io.BytesIO(ORDERS_XML)).orders[0].comments[0]

        assert comment.comment == "Shipped today"
        assert comment.is_customer_notified == "1"

    def test_order_without_children(self) -> None:
        order = OrdersParser().parse(io.BytesIO(ORDERS_XML)).orders[1]

        assert order.addresses == []
        assert order.items == []
        assert order.comments == []

    def test_empty_collection(self) -> None:
        assert OrdersParser().parse(io.BytesIO(b"<magento_api/>")).orders == []


class TestProductParsers:
    """Tests for ProductsParser and ProductParser."""

    def test_parses_product_list(self) -> None:
        response = ProductsParser().parse(io.BytesIO(PRODUCTS_XML))

        first, second = response.products
        assert first.entity_id == "1"
        assert first.type_id == "simple"
        assert first.price == Decimal("10.0000")
        assert second.price is None
        assert second.description == "Second product"

    def test_parses_single_product(self) -> None:
        product = ProductParser().parse(io.BytesIO(PRODUCT_XML))

        assert product.entity_id == "16"
        assert product.name == "Café Mug"
        assert product.price == Decimal("12.5000")
        assert product.stock_data is not None
        assert product.stock_data.qty == Decimal("99.0000")
        assert product.stock_data.is_in_stock is True
        assert product.stock_data.manage_stock is False

    def test_product_without_stock(self) -> None:
        product = ProductParser().parse(io.BytesIO(b"<magento_api><sku>x</sku></magento_api>"))

        assert product.stock_data is None


class TestStreamPosition:
    """Tests for keep_stream_position."""

    def test_rewinds_when_requested(self) -> None:
        stream = io.BytesIO(PRODUCTS_XML)

        ProductsParser().parse(stream, keep_stream_position=True)

        assert stream.tell() == 0

    def test_leaves_stream_consumed_otherwise(self) -> None:
        stream = io.BytesIO(PRODUCTS_XML)

        ProductsParser().parse(stream, keep_stream_position=False)

        assert stream.tell() == len(PRODUCTS_XML)

    def test_rewinds_to_starting_offset(self) -> None:
        prefix = b"junk"
        stream = io.BytesIO(prefix + PRODUCTS_XML)
        stream.seek(len(prefix))

        ProductsParser().parse(stream)

        assert stream.tell() == len(prefix)


class TestParseErrors:
    """Malformed bodies raise MagentoParseError carrying the payload."""

    def test_malformed_xml(self) -> None:
        body = "<magento_api><data_item>café".encode()

        with pytest.raises(MagentoParseError) as exc_info:
            OrdersParser().parse(io.BytesIO(body))

        assert exc_info.value.payload == "<magento_api><data_item>café"
        assert "orders" in exc_info.value.message
        assert "café" in str(exc_info.value)

    def test_bad_decimal(self) -> None:
        body = b"<magento_api><data_item><grand_total>abc</grand_total></data_item></magento_api>"

        with pytest.raises(MagentoParseError) as exc_info:
            OrdersParser().parse(io.BytesIO(body))

        assert "<grand_total>abc</grand_total>" in exc_info.value.payload

    def test_html_login_page(self) -> None:
        with pytest.raises(MagentoParseError):
            ProductParser().parse(io.BytesIO(b"<html><body>Login<br></body></html>"))
