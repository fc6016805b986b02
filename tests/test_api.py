"""Tests for the HTTP endpoints."""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cre_mock.api import create_app
from cre_mock.config import CreMockConfig, DocsConfig
from cre_mock.scenarios.market import CreMarketScenario
from cre_mock.store import Generation, StoreHandle

pytestmark = pytest.mark.asyncio


def _client(app: FastAPI) -> AsyncClient:
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture()
def sample_app(sample_generation: Generation) -> FastAPI:
    """App serving the hand-built generation."""
    handle = StoreHandle(lambda: sample_generation, initial=sample_generation)
    return create_app(CreMockConfig(), handle=handle)


@pytest.fixture()
def generated_app() -> FastAPI:
    """App serving a small generated market; resets build a new one."""
    scenario = CreMarketScenario(
        num_properties=15, num_parties=20, num_brokers=8, num_transactions=60
    )
    return create_app(CreMockConfig(), handle=StoreHandle(scenario.generate_generation))


@pytest_asyncio.fixture()
async def client(sample_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with _client(sample_app) as ac:
        yield ac


@pytest_asyncio.fixture()
async def generated_client(generated_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with _client(generated_app) as ac:
        yield ac


def _check_consistent(item: dict) -> None:
    """Embedded entities agree with the transaction's ids."""
    assert item["property"]["propertyId"] == item["propertyId"]
    assert item["buyer"]["partyId"] == item["buyerId"]
    assert item["seller"]["partyId"] == item["sellerId"]
    assert item["buyerId"] != item["sellerId"]
    assert [b["brokerId"] for b in item["brokers"]] == item["brokerIds"]
    assert [d["documentId"] for d in item["documents"]] == item["documentIds"]
    assert 1 <= len(item["brokerIds"]) <= 3
    assert (item["leaseTerms"] is not None) == (item["transactionType"] in ("lease", "sublease"))
    assert (item["mortgageeConditions"] is not None) == (item["transactionType"] == "mortgagee_sale")


# ========================================================================
# GET /v1/transactions
# ========================================================================


class TestListTransactions:
    """Tests for ``GET /v1/transactions``."""

    async def test_default_page(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/transactions")

        assert resp.status_code == 200
        body = resp.json()
        assert body["metadata"]["totalRecords"] == 5
        assert body["metadata"]["limit"] == 20
        assert body["metadata"]["offset"] == 0
        assert body["metadata"]["lastUpdated"]
        # Default order: newest transaction date first
        assert [t["transactionId"] for t in body["data"]][:2] == ["txn-4", "txn-2"]

    async def test_sorted_by_price_ascending(self, generated_client: AsyncClient) -> None:
        resp = await generated_client.get(
            "/v1/transactions",
            params={"limit": 5, "offset": 0, "sortBy": "price", "sortOrder": "asc"},
        )

        assert resp.status_code == 200
        prices = [t["price"] for t in resp.json()["data"]]
        assert len(prices) == 5
        assert prices == sorted(prices)

    async def test_inverted_price_bounds(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/transactions", params={"minPrice": 1_000_000, "maxPrice": 500_000})

        assert resp.status_code == 200
        assert resp.json()["data"] == []
        assert resp.json()["metadata"]["totalRecords"] == 0

    @pytest.mark.parametrize(
        "params",
        [{"limit": "0"}, {"limit": "-5"}, {"offset": "-1"}, {"limit": "ten"}, {"offset": "x"}, {"limit": "0.5"}],
    )
    async def test_invalid_pagination(self, client: AsyncClient, params: dict) -> None:
        resp = await client.get("/v1/transactions", params=params)

        assert resp.status_code == 400
        assert resp.json() == {
            "code": "INVALID_PAGINATION",
            "message": "Invalid limit or offset parameters.",
        }

    @pytest.mark.parametrize("limit,expected", [("1.5", 1), ("3abc", 3)])
    async def test_limit_uses_leading_integer(
        self, client: AsyncClient, limit: str, expected: int
    ) -> None:
        resp = await client.get("/v1/transactions", params={"limit": limit})

        assert resp.status_code == 200
        assert resp.json()["metadata"]["limit"] == expected
        assert len(resp.json()["data"]) == expected

    async def test_filters_and_enrichment(self, client: AsyncClient) -> None:
        resp = await client.get(
            "/v1/transactions", params={"city": "Metropolis", "buyerType": "REIT", "sortOrder": "asc"}
        )

        body = resp.json()
        assert body["metadata"]["totalRecords"] == 2
        first = body["data"][0]
        assert first["property"]["address"]["city"] == "Metropolis"
        assert first["buyer"]["classification"] == "REIT"

    async def test_dangling_references_serialized_as_null(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/transactions", params={"transactionType": "going_concern_sale"})

        item = resp.json()["data"][0]
        assert item["transactionId"] == "txn-4"
        assert item["property"] is None
        assert item["buyer"] is None
        assert [b["brokerId"] for b in item["brokers"]] == ["broker-2"]

    @pytest.mark.parametrize("start,expected", [("2020", 4), ("2020-06", 2)])
    async def test_reduced_start_date(
        self, client: AsyncClient, start: str, expected: int
    ) -> None:
        resp = await client.get("/v1/transactions", params={"startDate": start})

        assert resp.status_code == 200
        assert resp.json()["metadata"]["totalRecords"] == expected

    async def test_offset_past_end(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/transactions", params={"offset": 100})

        assert resp.status_code == 200
        assert resp.json()["data"] == []
        assert resp.json()["metadata"]["totalRecords"] == 5

    async def test_unknown_sort_falls_back(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/transactions", params={"sortBy": "color", "sortOrder": "sideways"})

        assert resp.status_code == 200
        assert resp.json()["data"][0]["transactionId"] == "txn-4"

    async def test_invalid_filter_value_matches_nothing(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/transactions", params={"startDate": "someday"})

        assert resp.status_code == 200
        assert resp.json()["metadata"]["totalRecords"] == 0

    async def test_generated_data_is_consistent(self, generated_client: AsyncClient) -> None:
        resp = await generated_client.get("/v1/transactions", params={"limit": 100})

        body = resp.json()
        assert body["metadata"]["totalRecords"] == 60
        for item in body["data"]:
            _check_consistent(item)


# ========================================================================
# GET /v1/transactions/{id}
# ========================================================================


class TestGetTransaction:
    """Tests for ``GET /v1/transactions/{id}``."""

    async def test_found(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/transactions/txn-3")

        assert resp.status_code == 200
        body = resp.json()
        assert body["transactionId"] == "txn-3"
        assert body["mortgageeConditions"] == "Sold As-Is via foreclosure auction."
        assert body["property"]["address"]["country"] == "Canada"
        assert body["price"] == 250000

    async def test_not_found(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/transactions/does-not-exist")

        assert resp.status_code == 404
        assert resp.json() == {
            "code": "NOT_FOUND",
            "message": "Transaction with ID 'does-not-exist' not found.",
        }


# ========================================================================
# GET /v1/trends
# ========================================================================


class TestTrends:
    """Tests for ``GET /v1/trends``."""

    async def test_shape(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/trends", params={"city": "Gotham"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["metadata"]["filters"] == {"city": "Gotham"}
        assert len(body["data"]) == 3
        assert {"interval", "totalSalesVolume", "averagePricePerSqft", "transactionCount"} == set(
            body["data"][0]
        )

    async def test_metrics_selection(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/trends", params={"metrics": "transactionCount"})

        assert all(set(entry) == {"interval", "transactionCount"} for entry in resp.json()["data"])


# ========================================================================
# POST /v1/reset-data
# ========================================================================


class TestResetData:
    """Tests for ``POST /v1/reset-data``."""

    async def test_reset_then_list(self, generated_client: AsyncClient) -> None:
        before = await generated_client.get("/v1/transactions", params={"limit": 100})
        resp = await generated_client.post("/v1/reset-data")

        assert resp.status_code == 200
        assert resp.json() == {"message": "Mock data regenerated successfully."}

        after = await generated_client.get("/v1/transactions", params={"limit": 100})
        body = after.json()
        assert body["metadata"]["totalRecords"] == 60
        assert {t["transactionId"] for t in body["data"]} != {
            t["transactionId"] for t in before.json()["data"]
        }
        for item in body["data"]:
            _check_consistent(item)

    async def test_old_ids_gone_after_reset(self, generated_client: AsyncClient) -> None:
        listing = await generated_client.get("/v1/transactions", params={"limit": 1})
        old_id = listing.json()["data"][0]["transactionId"]

        await generated_client.post("/v1/reset-data")
        resp = await generated_client.get(f"/v1/transactions/{old_id}")

        assert resp.status_code == 404

    async def test_failed_reset_keeps_data(self, sample_generation: Generation) -> None:
        def broken() -> Generation:
            raise RuntimeError("generator exploded")

        app = create_app(CreMockConfig(), handle=StoreHandle(broken, initial=sample_generation))
        async with _client(app) as ac:
            resp = await ac.post("/v1/reset-data")
            assert resp.status_code == 500
            assert resp.json() == {
                "code": "REGENERATION_FAILED",
                "message": "Failed to regenerate mock data.",
            }

            listing = await ac.get("/v1/transactions")
            assert listing.json()["metadata"]["totalRecords"] == 5


# ========================================================================
# Errors, docs, health
# ========================================================================


class TestUnexpectedErrors:
    """Tests for the catch-all error handler."""

    async def test_server_error_body(
        self,
        sample_app: FastAPI,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(sample_app.state.query_service, "list_transactions", explode)

        # The exception is answered, not re-raised to the server
        async with _client(sample_app) as ac:
            resp = await ac.get("/v1/transactions", headers={"Origin": "http://example.org"})

        assert resp.status_code == 500
        assert resp.json() == {"code": "SERVER_ERROR", "message": "An unexpected error occurred."}
        assert resp.headers["access-control-allow-origin"] == "*"
        logged = [r for r in caplog.records if r.exc_info and "Unhandled error" in r.getMessage()]
        assert len(logged) == 1


class TestFrameworkErrors:
    """Routing and binding errors use the same error body."""

    async def test_unknown_path(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/nope")

        assert resp.status_code == 404
        assert resp.json() == {"code": "NOT_FOUND", "message": "Not Found"}

    async def test_wrong_method(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/transactions")

        assert resp.status_code == 405
        assert resp.json() == {"code": "METHOD_NOT_ALLOWED", "message": "Method Not Allowed"}
        assert "GET" in resp.headers["allow"]

    async def test_validation_error(self, sample_app: FastAPI) -> None:
        @sample_app.get("/typed")
        def typed(count: int) -> dict[str, int]:
            return {"count": count}

        async with _client(sample_app) as ac:
            resp = await ac.get("/typed", params={"count": "many"})

        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "INVALID_REQUEST"
        assert "count" in body["message"]

