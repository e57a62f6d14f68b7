"""
Unit Tests for the EvaluationService.

Uses an in-memory repository so the use cases can be exercised
without a database.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from uuid import UUID, uuid4

import pytest

from src.application.dto import EvaluationRequest, PurchaseRecordResponse
from src.application.services import EvaluationService
from src.core.metrics import REGISTRY
from src.domain.entities import PurchaseRecord, format_timestamp
from src.domain.exceptions import (
    InvalidEvaluationRequestException,
    PurchaseRecordNotFoundException,
)
from src.domain.interfaces import PurchaseRecordRepository
from src.service.decision_engine import (
    Currency,
    FeelEmoji,
    PurchaseQuestionnaire,
    SavingsPlan,
    TimingEmoji,
    UserProfile,
    Verdict,
)


class InMemoryPurchaseRecordRepository(PurchaseRecordRepository):
    """Keeps records in a dict keyed by record ID."""

    def __init__(self):
        self.records: Dict[UUID, PurchaseRecord] = {}
        self.update_count = 0

    async def save(self, record: PurchaseRecord) -> PurchaseRecord:
        self.records[record.id] = record
        return record

    async def update(self, record: PurchaseRecord) -> PurchaseRecord:
        if record.id not in self.records:
            raise PurchaseRecordNotFoundException(str(record.id))
        self.update_count += 1
        self.records[record.id] = record
        return record

    async def get_by_id(self, record_id: UUID) -> Optional[PurchaseRecord]:
        return self.records.get(record_id)

    async def get_by_user_id(
        self,
        user_id: str,
        limit: int = 10,
        offset: int = 0,
    ) -> List[PurchaseRecord]:
        records = sorted(
            (r for r in self.records.values() if r.user_id == user_id),
            key=lambda r: r.created_at,
            reverse=True,
        )
        return records[offset:offset + limit]

    async def delete_by_user_id(self, user_id: str) -> int:
        ids = [rid for rid, r in self.records.items() if r.user_id == user_id]
        for rid in ids:
            del self.records[rid]
        return len(ids)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def repository() -> InMemoryPurchaseRecordRepository:
    return InMemoryPurchaseRecordRepository()


@pytest.fixture
def service(repository: InMemoryPurchaseRecordRepository) -> EvaluationService:
    return EvaluationService(purchase_repository=repository)


def make_request(
    user_id: str = "user_123",
    item: str = "Laptop",
    price: float = 1000,
    plans: Optional[List[SavingsPlan]] = None,
) -> EvaluationRequest:
    return EvaluationRequest(
        user_id=user_id,
        profile=UserProfile(
            monthly_income=10000,
            monthly_obligations=3000,
            current_balance=40000,
        ),
        questionnaire=PurchaseQuestionnaire(
            item=item,
            price=price,
            why_reason="For work",
            has_duplicate=False,
            wanted_since="For a long time (months+)",
            urgency="Not urgent",
            feel_emoji=FeelEmoji.HAPPY,
            timing_emoji=TimingEmoji.NO_RUSH,
        ),
        savings_plans=plans or [],
    )


def make_record(user_id: str, created_at: datetime) -> PurchaseRecord:
    return PurchaseRecord(
        user_id=user_id,
        item="Headphones",
        price=500,
        currency=Currency.SAR,
        verdict=Verdict.WAIT,
        verdict_score=1,
        insights={},
        answers={},
        created_at=created_at,
    )


# =============================================================================
# Evaluate Tests
# =============================================================================

class TestEvaluatePurchase:
    """Tests for evaluate_purchase."""

    @pytest.mark.asyncio
    async def test_evaluation_is_recorded(
        self,
        service: EvaluationService,
        repository: InMemoryPurchaseRecordRepository,
    ):
        response = await service.evaluate_purchase(make_request())

        assert response.verdict == "yes"
        assert response.verdict_text == "Yes - Go ahead"
        assert response.verdict_emoji == "✅"
        assert response.verdict_score == 6
        assert response.balance_after_purchase == 39000
        assert response.safe_buffer == 30000

        record = repository.records[UUID(response.record_id)]
        assert record.user_id == "user_123"
        assert record.verdict == Verdict.YES
        assert record.purchased is False
        assert record.insights == response.insights
        assert record.answers["hasDuplicate"] == "no"

    @pytest.mark.asyncio
    async def test_item_is_trimmed(
        self,
        service: EvaluationService,
    ):
        response = await service.evaluate_purchase(make_request(item="  Laptop  "))

        assert response.item == "Laptop"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_kwargs,message",
        [
            ({"price": 0}, "price must be positive"),
            ({"user_id": "  "}, "user_id is required"),
            ({"item": ""}, "item is required"),
        ],
    )
    async def test_invalid_request_rejected(
        self,
        service: EvaluationService,
        repository: InMemoryPurchaseRecordRepository,
        request_kwargs: dict,
        message: str,
    ):
        with pytest.raises(InvalidEvaluationRequestException) as exc_info:
            await service.evaluate_purchase(make_request(**request_kwargs))

        assert message in exc_info.value.message
        assert exc_info.value.code == "INVALID_EVALUATION_REQUEST"
        assert repository.records == {}

    @pytest.mark.asyncio
    async def test_invalid_savings_plan_rejected(
        self,
        service: EvaluationService,
    ):
        plan = SavingsPlan(
            id="bad",
            target_amount=1000,
            monthly_amount=100,
            duration_months=0,
        )

        with pytest.raises(InvalidEvaluationRequestException):
            await service.evaluate_purchase(make_request(plans=[plan]))


# =============================================================================
# History Tests
# =============================================================================

class TestPurchaseHistory:
    """Tests for history retrieval and clearing."""

    @pytest.mark.asyncio
    async def test_history_is_newest_first(
        self,
        service: EvaluationService,
        repository: InMemoryPurchaseRecordRepository,
    ):
        now = datetime.utcnow()
        older = await repository.save(make_record("user_123", now - timedelta(days=1)))
        newer = await repository.save(make_record("user_123", now))
        await repository.save(make_record("other_user", now))

        history = await service.get_purchase_history("user_123")

        assert history.user_id == "user_123"
        assert [p.record_id for p in history.purchases] == [
            str(newer.id),
            str(older.id),
        ]

    @pytest.mark.asyncio
    async def test_clear_history_only_touches_one_user(
        self,
        service: EvaluationService,
        repository: InMemoryPurchaseRecordRepository,
    ):
        await service.evaluate_purchase(make_request(user_id="user_a"))
        await service.evaluate_purchase(make_request(user_id="user_a"))
        await service.evaluate_purchase(make_request(user_id="user_b"))

        deleted = await service.clear_history("user_a")

        assert deleted == 2
        assert (await service.get_purchase_history("user_a")).purchases == []
        assert len((await service.get_purchase_history("user_b")).purchases) == 1


# =============================================================================
# Record Tests
# =============================================================================

class TestPurchaseRecordOperations:
    """Tests for get_purchase and mark_purchased."""

    @pytest.mark.asyncio
    async def test_get_unknown_record(self, service: EvaluationService):
        with pytest.raises(PurchaseRecordNotFoundException) as exc_info:
            await service.get_purchase(uuid4())

        assert exc_info.value.code == "PURCHASE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_mark_purchased_is_idempotent(
        self,
        service: EvaluationService,
        repository: InMemoryPurchaseRecordRepository,
    ):
        evaluated = await service.evaluate_purchase(make_request())
        record_id = UUID(evaluated.record_id)
        marked_before = REGISTRY.get_sample_value(
            "tarayath_purchase_marked_total", {"verdict": "yes"}
        ) or 0.0

        first = await service.mark_purchased(record_id)
        second = await service.mark_purchased(record_id)

        assert first.purchased is True
        assert first.purchased_at is not None
        assert second.purchased_at == first.purchased_at
        assert repository.update_count == 1
        assert REGISTRY.get_sample_value(
            "tarayath_purchase_marked_total", {"verdict": "yes"}
        ) == marked_before + 1

    @pytest.mark.asyncio
    async def test_mark_unknown_record(self, service: EvaluationService):
        with pytest.raises(PurchaseRecordNotFoundException):
            await service.mark_purchased(uuid4())


class TestPurchaseRecordEntity:
    """Tests for the PurchaseRecord entity."""

    def test_mark_purchased_keeps_first_time(self):
        record = make_record("user_123", datetime.utcnow())

        record.mark_purchased()
        first_time = record.purchased_at
        record.mark_purchased()

        assert record.purchased is True
        assert record.purchased_at == first_time

    def test_to_dict(self):
        record = make_record("user_123", datetime(2025, 9, 17, 12, 0, 0))

        data = record.to_dict()

        assert data["record_id"] == str(record.id)
        assert data["verdict"] == "wait"
        assert data["currency"] == "SAR"
        assert data["purchased_at"] is None
        assert data["created_at"] == "2025-09-17T12:00:00Z"

    def test_aware_timestamps_render_as_utc(self):
        riyadh = timezone(timedelta(hours=3))
        record = make_record("user_123", datetime(2025, 9, 17, 12, 0, 0, tzinfo=timezone.utc))
        record.purchased = True
        record.purchased_at = datetime(2025, 9, 17, 15, 30, 0, tzinfo=riyadh)

        response = PurchaseRecordResponse.from_entity(record)

        assert response.created_at == "2025-09-17T12:00:00Z"
        assert response.purchased_at == "2025-09-17T12:30:00Z"
        assert format_timestamp(None) is None
