"""
Deterministic sample-data generator.

Produces:
  - 5 sellers  (first / last name only, like the usual CRM export)
  - 20 products across 4 categories, cost price 40-70 % of the sale price
  - 200 purchase records with 1-4 line items each
    - discount per line: 0 / 5 / 10 / 25 %
    - total_amount  = undiscounted sum of the lines
    - total_discount = the money taken off by line discounts
"""

import random
from datetime import datetime, timedelta
from decimal import Decimal

from sales_analytics.models import (
    LineItem,
    Product,
    PurchaseRecord,
    SalesData,
    Seller,
)
from sales_analytics.money import to_cents

SEED = 42
START = datetime(2026, 1, 1)
END   = datetime(2026, 1, 31, 23, 59, 59)

_SELLER_NAMES = [
    ("Alexey", "Petrov"),
    ("Maria", "Ivanova"),
    ("Dmitry", "Sokolov"),
    ("Olga", "Smirnova"),
    ("Ivan", "Kuznetsov"),
]
_CATEGORIES = ["Electronics", "Home", "Garden", "Toys"]
_DISCOUNTS = [0, 0, 0, 5, 10, 25]


def _rand_date(rng: random.Random, lo: datetime = START, hi: datetime = END) -> str:
    delta = hi - lo
    secs = rng.randint(0, int(delta.total_seconds()))
    return (lo + timedelta(seconds=secs)).date().isoformat()


def build_sample_data(total_records: int = 200) -> SalesData:
    rng = random.Random(SEED)

    # ── sellers ──────────────────────────────────────────────────────────────
    sellers = [
        Seller(id=f"seller_{i}", first_name=first, last_name=last)
        for i, (first, last) in enumerate(_SELLER_NAMES, start=1)
    ]

    # ── products ─────────────────────────────────────────────────────────────
    products = []
    for i in range(1, 21):
        sale_price = to_cents(rng.uniform(5, 500))
        cost_share = Decimal(str(round(rng.uniform(0.4, 0.7), 2)))
        products.append(Product(
            sku=f"SKU_{i:03d}",
            name=f"Product {i}",
            category=rng.choice(_CATEGORIES),
            sale_price=sale_price,
            purchase_price=to_cents(sale_price * cost_share),
        ))

    # ── purchase records ─────────────────────────────────────────────────────
    records = []
    for n in range(1, total_records + 1):
        seller = rng.choice(sellers)
        items = []
        gross = Decimal("0")
        net = Decimal("0")
        for product in rng.sample(products, rng.randint(1, 4)):
            quantity = rng.randint(1, 5)
            discount = rng.choice(_DISCOUNTS)
            line_gross = product.sale_price * quantity
            gross += line_gross
            net += line_gross * (1 - Decimal(discount) / 100)
            items.append(LineItem(
                sku=product.sku,
                quantity=quantity,
                sale_price=product.sale_price,
                discount=discount,
            ))
        records.append(PurchaseRecord(
            receipt_id=f"receipt_{n:04d}",
            date=_rand_date(rng),
            seller_id=seller.id,
            customer_id=f"customer_{rng.randint(1, 60):03d}",
            total_amount=to_cents(gross),
            total_discount=to_cents(gross - net),
            items=items,
        ))

    return SalesData(sellers=sellers, products=products, purchase_records=records)
