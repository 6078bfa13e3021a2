"""
Default revenue and bonus strategies.

Both are plain functions with a fixed signature so callers can swap in
their own implementation through ``ReportOptions``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Optional

from sales_analytics.errors import (
    InvalidDiscount,
    InvalidPriceOrQuantity,
    InvalidPurchaseData,
)
from sales_analytics.models import LineItem, Product, SellerStats
from sales_analytics.money import as_decimal, to_cents

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")

# rank-based bonus tiers, as a share of profit
TOP_SELLER_RATE = Decimal("0.15")
RUNNER_UP_RATE = Decimal("0.10")
DEFAULT_RATE = Decimal("0.05")

RevenueCalculator = Callable[[LineItem, Optional[Product]], Any]
BonusCalculator = Callable[[int, int, SellerStats], Any]


def _read(item, field: str):
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


def calculate_simple_revenue(item: LineItem, _product: Optional[Product] = None) -> Decimal:
    """
    Net revenue of one line item: sale_price * quantity * (1 - discount / 100).

    Not rounded; rounding happens once, when the seller report is built.
    """
    sale_price = _read(item, "sale_price")
    quantity = _read(item, "quantity")
    discount = _read(item, "discount")

    if sale_price is None or quantity is None:
        raise InvalidPurchaseData(f"Line item {_read(item, 'sku')!r} has no sale price or quantity")

    sale_price = as_decimal(sale_price)
    quantity = as_decimal(quantity)
    discount = _ZERO if discount is None else as_decimal(discount)

    if sale_price < 0 or quantity <= 0 or quantity != quantity.to_integral_value():
        raise InvalidPriceOrQuantity(
            f"Invalid price {sale_price} or quantity {quantity} for {_read(item, 'sku')!r}"
        )
    if discount < 0 or discount > _HUNDRED:
        raise InvalidDiscount(f"Discount {discount} is outside 0..100")

    return sale_price * quantity * (1 - discount / _HUNDRED)


def calculate_bonus_by_profit(rank: int, total: int, seller: SellerStats) -> Decimal:
    """Bonus for the seller at zero-based ``rank`` out of ``total`` ranked by profit."""
    if total <= 0 or rank < 0 or rank >= total:
        return to_cents(_ZERO)

    profit = as_decimal(seller.profit)

    # Precedence: leader, then last place, then runners-up. A single seller
    # is both leader and last and gets the top tier. Do not move the
    # runner-up check above the last-place check: that order pays 10 % to
    # rank 1 of 2 and rank 2 of 3, while here last place always gets 0.
    if rank == 0:
        return to_cents(profit * TOP_SELLER_RATE)
    if rank == total - 1:
        return to_cents(_ZERO)
    if rank in (1, 2):
        return to_cents(profit * RUNNER_UP_RATE)
    return to_cents(profit * DEFAULT_RATE)


@dataclass(frozen=True)
class ReportOptions:
    calculate_revenue: RevenueCalculator = calculate_simple_revenue
    calculate_bonus: BonusCalculator = calculate_bonus_by_profit


DEFAULT_OPTIONS = ReportOptions()
