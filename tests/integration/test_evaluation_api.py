"""
Integration tests for the Evaluation API endpoints.

These tests verify:
1. POST /v1/evaluation - Evaluate a purchase and store it
2. Request validation and error responses
3. Request ID propagation
4. Health and root endpoints
"""

import pytest
from httpx import AsyncClient

from src.service.decision_engine.insights import (
    ABOVE_SAFE_BUFFER,
    ALREADY_OWN_SIMILAR,
    EMOTIONAL_HIGH_COST,
    FILLS_REAL_NEED,
    IMPACTS_URGENT_GOALS,
    NOT_RUSHED,
    REASONABLE_ENJOYMENT,
    REASONABLE_TIMING,
    SECOND_THOUGHTS,
    USEFUL_INVESTMENT,
)


# =============================================================================
# POST /v1/evaluation Tests
# =============================================================================

class TestCreateEvaluation:
    """Tests for POST /v1/evaluation endpoint."""

    @pytest.mark.asyncio
    async def test_good_purchase_is_a_yes(
        self,
        client: AsyncClient,
        good_purchase_request: dict,
    ):
        """
        A planned work purchase that keeps the safe buffer intact.

        Score: +2 work, +2 buffer, +1 wanted for months, +1 not rushed.
        """
        response = await client.post("/v1/evaluation", json=good_purchase_request)

        assert response.status_code == 200

        data = response.json()
        assert data["record_id"]
        assert data["item"] == "Laptop"
        assert data["currency"] == "SAR"
        assert data["verdict"] == "yes"
        assert data["verdict_text"] == "Yes - Go ahead"
        assert data["verdict_emoji"] == "✅"
        assert data["verdict_score"] == 6
        assert data["balance_after_purchase"] == 39000
        assert data["safe_buffer"] == 30000
        assert data["insights"] == {
            "wastingMoney": USEFUL_INVESTMENT,
            "needingMoneyLater": ABOVE_SAFE_BUFFER,
            "realizingDidntNeed": FILLS_REAL_NEED,
            "feelingGuiltyRushed": NOT_RUSHED,
        }

    @pytest.mark.asyncio
    async def test_risky_purchase_is_a_no(
        self,
        client: AsyncClient,
        risky_purchase_request: dict,
    ):
        """
        An impulsive duplicate purchase during an urgent savings plan.

        Score: -2 high cost, -1 urgent goal, -1 rushed, -1 recent.
        """
        response = await client.post("/v1/evaluation", json=risky_purchase_request)

        assert response.status_code == 200

        data = response.json()
        assert data["verdict"] == "no"
        assert data["verdict_text"] == "Not recommended now"
        assert data["verdict_emoji"] == "❌"
        assert data["verdict_score"] == -5
        assert data["currency"] == "USD"
        assert data["balance_after_purchase"] == -1000
        assert data["safe_buffer"] == 15000
        assert data["insights"] == {
            "wastingMoney": EMOTIONAL_HIGH_COST,
            "needingMoneyLater": IMPACTS_URGENT_GOALS,
            "realizingDidntNeed": ALREADY_OWN_SIMILAR,
            "feelingGuiltyRushed": SECOND_THOUGHTS,
        }

    @pytest.mark.asyncio
    async def test_borderline_purchase_is_a_wait(
        self,
        client: AsyncClient,
        wait_purchase_request: dict,
    ):
        response = await client.post("/v1/evaluation", json=wait_purchase_request)

        assert response.status_code == 200

        data = response.json()
        assert data["verdict"] == "wait"
        assert data["verdict_text"] == "Wait or reconsider"
        assert data["verdict_score"] == 0
        assert data["insights"]["wastingMoney"] == REASONABLE_ENJOYMENT
        assert data["insights"]["feelingGuiltyRushed"] == REASONABLE_TIMING

    @pytest.mark.asyncio
    async def test_completed_plans_do_not_count_as_urgent(
        self,
        client: AsyncClient,
        wait_purchase_request: dict,
    ):
        wait_purchase_request["savings_plans"][0]["is_completed"] = True

        response = await client.post("/v1/evaluation", json=wait_purchase_request)

        assert response.status_code == 200
        data = response.json()
        assert data["verdict_score"] == 1
        assert data["insights"]["needingMoneyLater"] != IMPACTS_URGENT_GOALS

    @pytest.mark.asyncio
    async def test_evaluation_is_stored_in_history(
        self,
        client: AsyncClient,
        good_purchase_request: dict,
    ):
        response = await client.post("/v1/evaluation", json=good_purchase_request)
        record_id = response.json()["record_id"]

        record = await client.get(f"/v1/purchases/{record_id}")

        assert record.status_code == 200
        data = record.json()
        assert data["user_id"] == "user_good"
        assert data["verdict"] == "yes"
        assert data["purchased"] is False
        assert data["answers"]["whyReason"] == "for work"
        assert data["answers"]["hasDuplicate"] == "no"
        assert data["answers"]["helpEmoji"] == "essential_for_work"

    @pytest.mark.asyncio
    async def test_same_input_same_verdict(
        self,
        client: AsyncClient,
        risky_purchase_request: dict,
    ):
        first = (await client.post("/v1/evaluation", json=risky_purchase_request)).json()
        second = (await client.post("/v1/evaluation", json=risky_purchase_request)).json()

        assert first["record_id"] != second["record_id"]
        assert first["verdict_score"] == second["verdict_score"]
        assert first["insights"] == second["insights"]


# =============================================================================
# Validation Tests
# =============================================================================

class TestEvaluationValidation:
    """Tests for request validation on POST /v1/evaluation."""

    @pytest.mark.asyncio
    async def test_zero_price_rejected(
        self,
        client: AsyncClient,
        good_purchase_request: dict,
    ):
        good_purchase_request["questionnaire"]["price"] = 0

        response = await client.post("/v1/evaluation", json=good_purchase_request)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_negative_income_rejected(
        self,
        client: AsyncClient,
        good_purchase_request: dict,
    ):
        good_purchase_request["profile"]["monthly_income"] = -1

        response = await client.post("/v1/evaluation", json=good_purchase_request)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_blank_item_rejected(
        self,
        client: AsyncClient,
        good_purchase_request: dict,
    ):
        good_purchase_request["questionnaire"]["item"] = "   "

        response = await client.post("/v1/evaluation", json=good_purchase_request)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_emoji_rejected(
        self,
        client: AsyncClient,
        good_purchase_request: dict,
    ):
        good_purchase_request["questionnaire"]["feel_emoji"] = "furious"

        response = await client.post("/v1/evaluation", json=good_purchase_request)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_zero_income_is_accepted(
        self,
        client: AsyncClient,
        good_purchase_request: dict,
    ):
        good_purchase_request["profile"]["monthly_income"] = 0

        response = await client.post("/v1/evaluation", json=good_purchase_request)

        assert response.status_code == 200
        data = response.json()
        assert data["safe_buffer"] == 0
        # +2 work +2 buffer +1 months +1 not rushed -2 high cost
        assert data["verdict_score"] == 4
        assert data["insights"]["wastingMoney"] == USEFUL_INVESTMENT


# =============================================================================
# Request Context Tests
# =============================================================================

class TestRequestContext:
    """Tests for request ID handling and error bodies."""

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.headers.get("X-Request-ID")

    @pytest.mark.asyncio
    async def test_request_id_echoed_in_errors(self, client: AsyncClient):
        response = await client.get(
            "/v1/purchases/00000000-0000-0000-0000-000000000000",
            headers={"X-Request-ID": "req-123"},
        )

        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "req-123"

        data = response.json()
        assert data["error"] == "PURCHASE_NOT_FOUND"
        assert data["request_id"] == "req-123"
        assert "00000000-0000-0000-0000-000000000000" in data["message"]


# =============================================================================
# Misc Endpoint Tests
# =============================================================================

class TestServiceEndpoints:
    """Tests for health and root endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"]

    @pytest.mark.asyncio
    async def test_root_redirects_to_docs(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 307
        assert response.headers["location"] == "/docs"
