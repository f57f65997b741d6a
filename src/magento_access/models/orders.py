"""Order-related models."""

from decimal import Decimal

from pydantic import BaseModel, Field


class OrderAddress(BaseModel):
    """Billing or shipping address attached to an order."""

    address_type: str | None = None  # "billing" | "shipping"
    prefix: str | None = None
    firstname: str | None = None
    middlename: str | None = None
    lastname: str | None = None
    suffix: str | None = None
    company: str | None = None
    street: str | None = None
    city: str | None = None
    region: str | None = None
    postcode: str | None = None
    country_id: str | None = None
    email: str | None = None
    telephone: str | None = None


class OrderItem(BaseModel):
    """Line item of an order."""

    item_id: str | None = None
    parent_item_id: str | None = None
    sku: str | None = None
    name: str | None = None

    qty_canceled: Decimal | None = None
    qty_invoiced: Decimal | None = None
    qty_ordered: Decimal | None = None
    qty_refunded: Decimal | None = None
    qty_shipped: Decimal | None = None

    price: Decimal | None = None
    base_price: Decimal | None = None
    original_price: Decimal | None = None
    base_original_price: Decimal | None = None
    tax_percent: Decimal | None = None
    tax_amount: Decimal | None = None
    base_tax_amount: Decimal | None = None
    discount_amount: Decimal | None = None
    base_discount_amount: Decimal | None = None
    row_total: Decimal | None = None
    base_row_total: Decimal | None = None
    price_incl_tax: Decimal | None = None
    base_price_incl_tax: Decimal | None = None
    row_total_incl_tax: Decimal | None = None
    base_row_total_incl_tax: Decimal | None = None


class OrderComment(BaseModel):
    """Status history comment on an order."""

    comment: str | None = None
    status: str | None = None
    is_customer_notified: str | None = None
    is_visible_on_front: str | None = None


class Order(BaseModel):
    """A Magento sales order."""

    order_id: str | None = Field(default=None, description="Magento entity_id")
    status: str | None = None
    customer_id: str | None = None
    store_name: str | None = None
    created_at: str | None = None
    payment_method: str | None = None

    base_currency_code: str | None = None
    order_currency_code: str | None = None

    base_discount_amount: Decimal | None = None
    base_grand_total: Decimal | None = None
    base_shipping_amount: Decimal | None = None
    base_shipping_tax_amount: Decimal | None = None
    base_subtotal: Decimal | None = None
    base_tax_amount: Decimal | None = None
    base_total_paid: Decimal | None = None
    base_total_refunded: Decimal | None = None
    base_shipping_discount_amount: Decimal | None = None
    base_subtotal_incl_tax: Decimal | None = None
    base_total_due: Decimal | None = None

    discount_amount: Decimal | None = None
    grand_total: Decimal | None = None
    shipping_amount: Decimal | None = None
    shipping_tax_amount: Decimal | None = None
    shipping_discount_amount: Decimal | None = None
    shipping_incl_tax: Decimal | None = None
    store_to_order_rate: Decimal | None = None
    subtotal: Decimal | None = None
    subtotal_incl_tax: Decimal | None = None
    tax_amount: Decimal | None = None
    total_paid: Decimal | None = None
    total_refunded: Decimal | None = None
    total_due: Decimal | None = None

    addresses: list[OrderAddress] = Field(default_factory=list)
    items: list[OrderItem] = Field(default_factory=list)
    comments: list[OrderComment] = Field(default_factory=list)


class GetOrdersResponse(BaseModel):
    """Response from GET /api/rest/orders."""

    orders: list[Order] = Field(default_factory=list)
