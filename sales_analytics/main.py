import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request

from sales_analytics.config import RevenueMode, Settings
from sales_analytics.engine import analyze_sales_data
from sales_analytics.errors import SalesReportError
from sales_analytics.models import SalesData
from sales_analytics.strategies import DEFAULT_OPTIONS

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the sample dataset once so the demo report is immediately usable
    from scripts.seed_data import build_sample_data
    app.state.sample_data = build_sample_data()
    yield


app = FastAPI(
    title="Seller Performance Report",
    version="1.0.0",
    description="Revenue, profit, bonus and top products per seller",
    lifespan=lifespan,
)


def _run_report(data: SalesData, revenue_mode: Optional[RevenueMode]):
    config = settings.report_config(revenue_mode=revenue_mode)
    try:
        reports = analyze_sales_data(data, DEFAULT_OPTIONS, config)
    except SalesReportError as exc:
        logger.info("Rejected report request: %s", exc)
        raise HTTPException(400, str(exc))
    return {"sellers": [r.model_dump() for r in reports]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.post("/api/v1/reports/sellers", summary="Build the seller report for posted data")
def create_seller_report(
    data: SalesData,
    revenue_mode: Optional[RevenueMode] = Query(default=None),
):
    return _run_report(data, revenue_mode)


@app.get("/api/v1/reports/sample", summary="Seller report over the bundled sample data")
def get_sample_report(
    request: Request,
    revenue_mode: Optional[RevenueMode] = Query(default=None),
):
    return _run_report(request.app.state.sample_data, revenue_mode)


@app.get("/health")
def health_check():
    return {"status": "healthy", "version": app.version}
