import pytest
from fastapi.testclient import TestClient

from sales_analytics.main import app
from scripts.seed_data import build_sample_data


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def payload() -> dict:
    return {
        "sellers": [
            {"id": "seller_a", "name": "Alice Adams"},
            {"id": "seller_b", "first_name": "Bob", "last_name": "Brown"},
        ],
        "products": [
            {"sku": "SKU_1", "purchase_price": 60},
            {"sku": "SKU_2", "purchase_price": 30},
        ],
        "purchase_records": [
            {"seller_id": "seller_a", "total_amount": 100, "total_discount": 0,
             "items": [{"sku": "SKU_1", "quantity": 1, "sale_price": 100, "discount": 0}]},
            {"seller_id": "seller_b", "total_amount": 100, "total_discount": 0,
             "items": [{"sku": "SKU_2", "quantity": 2, "sale_price": 50, "discount": 0}]},
            {"seller_id": "seller_a", "total_amount": 200, "total_discount": 0,
             "items": [{"sku": "SKU_2", "quantity": 4, "sale_price": 50, "discount": 0}]},
        ],
    }


class TestSellerReportEndpoint:
    def test_report_for_posted_data(self, client):
        resp = client.post("/api/v1/reports/sellers", json=payload())
        assert resp.status_code == 200

        sellers = resp.json()["sellers"]
        assert [s["seller_id"] for s in sellers] == ["seller_a", "seller_b"]
        assert sellers[0]["revenue"] == 300.0
        assert sellers[0]["profit"] == 120.0
        assert sellers[0]["bonus"] == 18.0
        assert sellers[0]["top_products"] == [
            {"sku": "SKU_2", "quantity": 4},
            {"sku": "SKU_1", "quantity": 1},
        ]
        assert sellers[1]["name"] == "Bob Brown"
        assert sellers[1]["bonus"] == 0.0

    def test_gross_revenue_mode(self, client):
        body = payload()
        body["purchase_records"][0]["total_discount"] = 25
        net = client.post("/api/v1/reports/sellers", json=body).json()
        gross = client.post("/api/v1/reports/sellers?revenue_mode=gross", json=body).json()
        assert net["sellers"][0]["revenue"] == 275.0
        assert gross["sellers"][0]["revenue"] == 300.0

    def test_empty_collection_is_bad_request(self, client):
        body = payload()
        body["products"] = []
        resp = client.post("/api/v1/reports/sellers", json=body)
        assert resp.status_code == 400
        assert "products" in resp.json()["detail"]

    def test_invalid_line_item_is_bad_request(self, client):
        body = payload()
        body["purchase_records"][0]["items"][0]["discount"] = 150
        resp = client.post("/api/v1/reports/sellers", json=body)
        assert resp.status_code == 400

    def test_schema_violation_is_unprocessable(self, client):
        resp = client.post("/api/v1/reports/sellers", json={"sellers": "nope"})
        assert resp.status_code == 422


class TestSampleReport:
    def test_sample_report_covers_every_record(self, client):
        resp = client.get("/api/v1/reports/sample")
        assert resp.status_code == 200

        sellers = resp.json()["sellers"]
        sample = build_sample_data()
        assert len(sellers) == len(sample.sellers)
        assert sum(s["sales_count"] for s in sellers) == len(sample.purchase_records)

        profits = [s["profit"] for s in sellers]
        assert profits == sorted(profits, reverse=True)
        assert sellers[-1]["bonus"] == 0.0
        for s in sellers:
            assert len(s["top_products"]) <= 10

    def test_sample_data_is_deterministic(self):
        assert build_sample_data() == build_sample_data()

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
