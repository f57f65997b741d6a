"""Product-related models."""

from decimal import Decimal

from pydantic import BaseModel, Field


class StockData(BaseModel):
    """Inventory block of a single product."""

    qty: Decimal | None = None
    is_in_stock: bool | None = None
    manage_stock: bool | None = None
    min_qty: Decimal | None = None


class Product(BaseModel):
    """Catalog product as returned in product listings."""

    entity_id: str | None = Field(default=None, description="Magento entity_id")
    type_id: str | None = None
    sku: str | None = None
    name: str | None = None
    price: Decimal | None = None
    description: str | None = None


class GetProductsResponse(BaseModel):
    """Response from GET /api/rest/products."""

    products: list[Product] = Field(default_factory=list)


class GetProductResponse(BaseModel):
    """Response from GET /api/rest/products/{id}."""

    entity_id: str | None = None
    sku: str | None = None
    name: str | None = None
    price: Decimal | None = None
    description: str | None = None
    stock_data: StockData | None = None
