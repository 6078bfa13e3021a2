from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import Optional


class Seller(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        full = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full or self.id


class Product(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    sku: str
    purchase_price: Decimal
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[Decimal] = None


class LineItem(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    sku: str
    # range checks live in the revenue strategy, not here
    quantity: Optional[int] = None
    sale_price: Optional[Decimal] = None
    discount: Decimal = Decimal("0")


class PurchaseRecord(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    seller_id: str
    total_amount: Decimal
    total_discount: Decimal = Decimal("0")
    items: list[LineItem] = Field(default_factory=list)
    receipt_id: Optional[str] = None
    customer_id: Optional[str] = None
    date: Optional[str] = None


class SalesData(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Running totals ───────────────────────────────────────────────────────────

class SellerStats(BaseModel):
    """Per-seller accumulator, mutated only while a single report is built."""

    seller_id: str
    name: str
    sales_count: int = 0
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    # sku -> cumulative quantity, in first-seen order
    products_sold: dict[str, int] = Field(default_factory=dict)
    bonus: Decimal = Decimal("0")
    top_products: list["TopProduct"] = Field(default_factory=list)


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: int


class SellerReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    bonus: Decimal
    top_products: list[TopProduct]


SellerStats.model_rebuild()
