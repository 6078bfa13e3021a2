class SalesReportError(ValueError):
    """Base class for every caller-input failure raised by the report."""


# ── input / options ──────────────────────────────────────────────────────────

class InvalidInputData(SalesReportError):
    pass


class InvalidOptions(SalesReportError):
    pass


class InvalidStrategyType(SalesReportError):
    pass


# ── line items (raised by the revenue strategy) ──────────────────────────────

class InvalidPurchaseData(SalesReportError):
    pass


class InvalidPriceOrQuantity(SalesReportError):
    pass


class InvalidDiscount(SalesReportError):
    pass
