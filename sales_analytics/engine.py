import logging
from collections.abc import Mapping
from numbers import Number
from typing import Any, Optional

from pydantic import ValidationError

from sales_analytics.config import ReportConfig, RevenueMode
from sales_analytics.errors import (
    InvalidInputData,
    InvalidOptions,
    InvalidPurchaseData,
    InvalidStrategyType,
)
from sales_analytics.models import (
    Product,
    SalesData,
    SellerReport,
    SellerStats,
    TopProduct,
)
from sales_analytics.money import as_decimal, to_cents

logger = logging.getLogger(__name__)

_COLLECTIONS = ("sellers", "products", "purchase_records")
_STRATEGIES = ("calculate_revenue", "calculate_bonus")


def _load_data(data: Any) -> SalesData:
    if data is None:
        raise InvalidInputData("Sales data is required")

    if isinstance(data, SalesData):
        parsed = data
    elif isinstance(data, Mapping):
        for key in _COLLECTIONS:
            if not isinstance(data.get(key), (list, tuple)):
                raise InvalidInputData(f"'{key}' must be a list")
        try:
            parsed = SalesData.model_validate(
                {key: list(data[key]) for key in _COLLECTIONS}
            )
        except ValidationError as exc:
            raise InvalidInputData(f"Malformed sales data: {exc}") from exc
    else:
        raise InvalidInputData(f"Unsupported sales data type: {type(data).__name__}")

    for key in _COLLECTIONS:
        if not getattr(parsed, key):
            raise InvalidInputData(f"'{key}' must not be empty")
    return parsed


def _load_strategies(options: Any):
    if options is None or isinstance(options, (str, bytes, Number, list, tuple, set)):
        raise InvalidOptions("options must be an object holding the report strategies")

    # a key that is present but None is a type error, not a missing strategy
    if isinstance(options, Mapping):
        found = {name: options[name] for name in _STRATEGIES if name in options}
    else:
        found = {name: getattr(options, name) for name in _STRATEGIES if hasattr(options, name)}

    missing = [name for name in _STRATEGIES if name not in found]
    if missing:
        raise InvalidOptions(f"options must define {', '.join(missing)}")

    for name, fn in found.items():
        if not callable(fn):
            raise InvalidStrategyType(f"{name} must be callable, got {type(fn).__name__}")

    return found["calculate_revenue"], found["calculate_bonus"]


def analyze_sales_data(
    data: Any,
    options: Any,
    config: Optional[ReportConfig] = None,
) -> list[SellerReport]:
    """
    Build the seller performance report, ordered by profit (highest first).

    Fails before any aggregation on malformed data or options; errors raised
    by the strategies abort the whole run.
    """
    sales = _load_data(data)
    calculate_revenue, calculate_bonus = _load_strategies(options)
    config = config or ReportConfig()

    # ── 1. One accumulator per seller, in input order ────────────────────────
    stats: dict[str, SellerStats] = {}
    for seller in sales.sellers:
        if seller.id in stats:
            raise InvalidInputData(f"Duplicate seller id '{seller.id}'")
        stats[seller.id] = SellerStats(seller_id=seller.id, name=seller.display_name)

    # ── 2. Product index (a repeated SKU keeps the last record) ──────────────
    products: dict[str, Product] = {p.sku: p for p in sales.products}

    # ── 3. Fold purchase records into the seller totals ──────────────────────
    skipped_records = 0
    skipped_items = 0

    for record in sales.purchase_records:
        seller = stats.get(record.seller_id)
        if seller is None:
            logger.warning("Seller '%s' not found, skipping purchase record %s",
                           record.seller_id, record.receipt_id or "")
            skipped_records += 1
            continue

        seller.sales_count += 1
        if config.revenue_mode == RevenueMode.NET:
            seller.revenue += record.total_amount - record.total_discount
        else:
            seller.revenue += record.total_amount

        for item in record.items:
            product = products.get(item.sku)
            if product is None:
                logger.warning("Product '%s' not found, skipping line item", item.sku)
                skipped_items += 1
                continue

            item_revenue = as_decimal(calculate_revenue(item, product))
            quantity = item.quantity
            if quantity is None:
                raise InvalidPurchaseData(f"Line item '{item.sku}' has no quantity")
            cost = product.purchase_price * quantity
            seller.profit += item_revenue - cost

            seller.products_sold.setdefault(item.sku, 0)
            seller.products_sold[item.sku] += quantity

    # ── 4. Rank by profit; sorted() keeps input order for ties ───────────────
    ranked = sorted(stats.values(), key=lambda s: s.profit, reverse=True)

    # ── 5. Bonus and top products per rank ───────────────────────────────────
    total = len(ranked)
    for rank, seller in enumerate(ranked):
        seller.bonus = as_decimal(calculate_bonus(rank, total, seller))
        best = sorted(seller.products_sold.items(), key=lambda kv: kv[1], reverse=True)
        seller.top_products = [
            TopProduct(sku=sku, quantity=qty)
            for sku, qty in best[: config.top_products_limit]
        ]

    logger.info(
        "Sales report built: %d sellers, %d purchase records (%d skipped), %d line items skipped",
        total, len(sales.purchase_records), skipped_records, skipped_items,
    )

    # ── 6. Round and freeze ──────────────────────────────────────────────────
    return [
        SellerReport(
            seller_id=s.seller_id,
            name=s.name,
            revenue=to_cents(s.revenue),
            profit=to_cents(s.profit),
            sales_count=s.sales_count,
            bonus=to_cents(s.bonus),
            top_products=s.top_products,
        )
        for s in ranked
    ]
