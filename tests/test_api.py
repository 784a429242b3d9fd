"""
TimeBucks API Tests
"""

import pytest
from fastapi.testclient import TestClient

from timebucks import __version__
from timebucks.api.routes import get_registry
from timebucks.computation.registry import TransformationRegistry
from timebucks.main import create_app
from timebucks.models import TimeBucks


def triple(source, target_year, target_month=None, target_day=None):
    return TimeBucks.create_calculated(
        source.amount * 3, source.currency, target_year, "CUSTOM:TRIPLE", source.year,
        target_month, target_day, source.month, source.day
    )


@pytest.fixture
def registry():
    registry = TransformationRegistry.with_builtins()
    registry.register("CUSTOM:TRIPLE", triple, description="Triples the amount")
    return registry


@pytest.fixture
def client(registry):
    app = create_app()
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as client:
        yield client


class TestParseEndpoint:

    def test_parse_calculated(self, client):
        resp = client.get("/api/v1/parse", params={"notation": "$8,000@2024[CPI:1970]"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["notation"] == "$8,000@2024[CPI:1970]"
        assert body["amount"] == "8000"
        assert body["currency"] == "USD"
        assert body["is_calculated"] is True
        assert body["method"] == "CPI"
        assert body["source_year"] == 1970

    def test_parse_decimal_amount(self, client):
        resp = client.get("/api/v1/parse", params={"notation": "£1,234.56@1950-04"})

        body = resp.json()
        assert body["amount"] == "1234.56"
        assert body["month"] == 4
        assert body["is_calculated"] is False

    def test_parse_invalid(self, client):
        resp = client.get("/api/v1/parse", params={"notation": "₹100@1970"})

        assert resp.status_code == 400
        error = resp.json()["detail"]["error"]
        assert error["code"] == "TIMEBUCKS_INVALID_NOTATION"
        assert error["message"] == "Invalid TimeBucks notation: ₹100@1970"


class TestValidateEndpoint:

    @pytest.mark.parametrize("notation,valid", [
        ("$100@1970", True),
        ("$100", False),
        ("100@1970", False),
    ])
    def test_validate(self, client, notation, valid):
        resp = client.get("/api/v1/validate", params={"notation": notation})

        assert resp.status_code == 200
        assert resp.json() == {"notation": notation, "valid": valid}


class TestTransformEndpoint:

    def test_transform(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "$1,000@1970",
            "method": "CPI",
            "target_year": 2024
        })

        assert resp.status_code == 200
        body = resp.json()
        assert body["original"] == "$1,000@1970"
        assert body["result"] == "$7,997.42@2024[CPI:1970]"
        assert body["amount"] == "7997.42"
        assert body["method"] == "CPI"
        assert body["rate"] == "7.99742"

    def test_transform_with_dates(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "$100@1970-06-15",
            "method": "CPI",
            "target_year": 2024,
            "target_month": 12,
            "target_day": 25
        })

        assert resp.json()["result"] == "$799.74@2024-12-25[CPI:1970-06-15]"

    def test_transform_default_method(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "$100@1970",
            "target_year": 2024
        })

        assert resp.status_code == 200
        assert resp.json()["method"] == "CPI"

    def test_transform_custom_method(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "$100@1970",
            "method": "CUSTOM:TRIPLE",
            "target_year": 2024
        })

        assert resp.json()["result"] == "$300@2024[CUSTOM:TRIPLE:1970]"

    def test_transform_zero_amount(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "$0@1970",
            "method": "GOLD",
            "target_year": 2024
        })

        assert resp.json()["rate"] is None

    def test_transform_unknown_method(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "$100@1970",
            "method": "UNKNOWN",
            "target_year": 2024
        })

        assert resp.status_code == 404
        error = resp.json()["detail"]["error"]
        assert error["code"] == "TIMEBUCKS_UNKNOWN_METHOD"
        assert "UNKNOWN" in error["message"]

    def test_transform_invalid_notation(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "invalid notation",
            "method": "CPI",
            "target_year": 2024
        })

        assert resp.status_code == 400

    def test_transform_day_without_month(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "$100@1970",
            "method": "CPI",
            "target_year": 2024,
            "target_day": 5
        })

        assert resp.status_code == 422

    def test_transform_bad_target_month(self, client):
        resp = client.post("/api/v1/transform", json={
            "notation": "$100@1970",
            "target_year": 2024,
            "target_month": 13
        })

        assert resp.status_code == 422


class TestMethodsAndHealth:

    def test_methods(self, client):
        resp = client.get("/api/v1/methods")

        names = [m["name"] for m in resp.json()["methods"]]
        assert names == ["CPI", "WAGE", "GOLD", "CUSTOM:TRIPLE"]

    def test_health(self, client):
        resp = client.get("/api/v1/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "version": __version__, "methods": 4}

    def test_root(self, client):
        resp = client.get("/")

        assert resp.json()["name"] == "TimeBucks"
