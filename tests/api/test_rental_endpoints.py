"""API tests for rental endpoints.

Tests the HTTP request/response cycle for the rental lifecycle:
- POST /api/rentals (create)
- GET /api/rentals/{id}, GET /api/rentals/overdue
- POST /api/rentals/overdue/processing
- PUT /api/rentals/{id}/activate|return|extend|cancel
- GET /api/rentals/{id}/damage-assessment

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- Tests request validation and RFC 7807 error responses
- Mocks handlers to test HTTP layer behavior
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from uuid_extensions import uuid7

from src.application.dtos import (
    CreateRentalResult,
    DamageAssessmentResult,
    ExtendRentalResult,
    OverdueRentalItem,
    ProcessOverdueRentalsResult,
    RentalResult,
    ReturnRentalResult,
)
from src.core.container import (
    get_activate_rental_handler,
    get_cancel_rental_handler,
    get_create_rental_handler,
    get_damage_assessment_handler,
    get_extend_rental_handler,
    get_get_rental_handler,
    get_overdue_rentals_handler,
    get_process_overdue_rentals_handler,
    get_return_rental_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from tests.api.conftest import RaisingHandler

START = datetime(2026, 5, 1, tzinfo=UTC)
END = datetime(2026, 5, 4, tzinfo=UTC)


def rental_not_found(rental_id) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.RENTAL_NOT_FOUND,
        message=f"Rental {rental_id} not found",
        resource_type="Rental",
        resource_id=str(rental_id),
        details={"rental_id": str(rental_id)},
    )


@pytest.fixture
def rental_id():
    return uuid7()


@pytest.fixture
def rental_result(rental_id):
    now = datetime.now(UTC)
    return RentalResult(
        id=rental_id,
        equipment_id=uuid7(),
        member_id=uuid7(),
        start_date=START,
        end_date=END,
        status="active",
        base_cost=Decimal("75.00"),
        discount=Decimal("7.50"),
        late_fee=Decimal("0.00"),
        damage_fee=Decimal("0.00"),
        total_cost=Decimal("67.50"),
        currency="USD",
        condition_at_start="excellent",
        condition_at_return=None,
        is_overdue=False,
        days_overdue=0,
        returned_at=None,
        cancelled_at=None,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def create_payload():
    return {
        "equipment_id": str(uuid7()),
        "member_id": str(uuid7()),
        "start_date": START.isoformat(),
        "end_date": END.isoformat(),
    }


# =============================================================================
# Create Rental (POST /api/rentals)
# =============================================================================


@pytest.mark.api
class TestCreateRental:
    def test_create_rental_returns_201_with_pricing(
        self, client, override_handler, rental_id, create_payload
    ):
        handler = override_handler(
            get_create_rental_handler,
            Success(
                value=CreateRentalResult(
                    rental_id=rental_id,
                    status="pending",
                    start_date=START,
                    end_date=END,
                    base_cost=Decimal("75.00"),
                    discount=Decimal("7.50"),
                    total_cost=Decimal("67.50"),
                    currency="USD",
                    transaction_id="mock_abc",
                )
            ),
        )

        response = client.post("/api/rentals", json=create_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["rental_id"] == str(rental_id)
        assert data["status"] == "pending"
        assert Decimal(data["total_cost"]) == Decimal("67.50")
        assert Decimal(data["discount"]) == Decimal("7.50")
        assert data["transaction_id"] == "mock_abc"

        command = handler.received[0]
        assert str(command.equipment_id) == create_payload["equipment_id"]
        assert command.payment_method == "card"

    def test_malformed_equipment_id_returns_422(self, client, create_payload):
        create_payload["equipment_id"] = "not-a-uuid"

        response = client.post("/api/rentals", json=create_payload)

        assert response.status_code == 422
        data = response.json()
        assert data["title"] == "Validation Failed"
        assert data["errors"][0]["field"] == "equipment_id"

    def test_missing_dates_returns_422(self, client, create_payload):
        del create_payload["end_date"]

        response = client.post("/api/rentals", json=create_payload)

        assert response.status_code == 422
        assert [e["field"] for e in response.json()["errors"]] == ["end_date"]

    def test_invalid_date_range_returns_400_with_field(
        self, client, override_handler, create_payload
    ):
        override_handler(
            get_create_rental_handler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_DATE_RANGE,
                    message="End date must be after start date",
                    field="end_date",
                )
            ),
        )

        response = client.post("/api/rentals", json=create_payload)

        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Validation Failed"
        assert data["code"] == "invalid_date_range"
        assert data["errors"] == [
            {
                "field": "end_date",
                "code": "invalid_date_range",
                "message": "End date must be after start date",
            }
        ]

    def test_payment_declined_returns_402(self, client, override_handler, create_payload):
        override_handler(
            get_create_rental_handler,
            Failure(
                error=DomainError(
                    code=ErrorCode.PAYMENT_FAILED,
                    message="Payment was declined",
                    details={"amount": "67.50", "currency": "USD"},
                )
            ),
        )

        response = client.post("/api/rentals", json=create_payload)

        assert response.status_code == 402
        data = response.json()
        assert data["title"] == "Payment Failed"
        assert data["type"].endswith("/errors/payment_required")
        assert data["details"] == {"amount": "67.50", "currency": "USD"}

    def test_rental_limit_returns_403(self, client, override_handler, create_payload):
        override_handler(
            get_create_rental_handler,
            Failure(
                error=DomainError(
                    code=ErrorCode.RENTAL_LIMIT_EXCEEDED,
                    message="Member has reached the rental limit for their tier",
                )
            ),
        )

        response = client.post("/api/rentals", json=create_payload)

        assert response.status_code == 403
        assert response.json()["code"] == "rental_limit_exceeded"

    def test_unavailable_for_period_returns_409(self, client, override_handler, create_payload):
        override_handler(
            get_create_rental_handler,
            Failure(
                error=DomainError(
                    code=ErrorCode.EQUIPMENT_UNAVAILABLE_FOR_PERIOD,
                    message="Equipment is already booked for the requested period",
                )
            ),
        )

        response = client.post("/api/rentals", json=create_payload)

        assert response.status_code == 409
        data = response.json()
        assert data["title"] == "Resource Conflict"
        assert data["instance"] == "/api/rentals"

    def test_error_carries_request_trace_id(self, client, override_handler, create_payload):
        override_handler(
            get_create_rental_handler,
            Failure(
                error=NotFoundError(
                    code=ErrorCode.MEMBER_NOT_FOUND,
                    message="Member not found",
                    resource_type="Member",
                    resource_id=create_payload["member_id"],
                )
            ),
        )

        response = client.post(
            "/api/rentals", json=create_payload, headers={"X-Trace-Id": "trace-123"}
        )

        assert response.status_code == 404
        assert response.headers["X-Trace-Id"] == "trace-123"
        assert response.json()["trace_id"] == "trace-123"


# =============================================================================
# Read Endpoints
# =============================================================================


@pytest.mark.api
class TestGetRental:
    def test_get_rental_returns_details(
        self, client, override_handler, rental_id, rental_result
    ):
        handler = override_handler(get_get_rental_handler, Success(value=rental_result))

        response = client.get(f"/api/rentals/{rental_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(rental_id)
        assert data["status"] == "active"
        assert data["is_overdue"] is False
        assert data["condition_at_return"] is None
        assert handler.received[0].rental_id == rental_id

    def test_get_rental_not_found(self, client, override_handler, rental_id):
        override_handler(get_get_rental_handler, Failure(error=rental_not_found(rental_id)))

        response = client.get(f"/api/rentals/{rental_id}")

        assert response.status_code == 404
        data = response.json()
        assert data["title"] == "Resource Not Found"
        assert data["code"] == "rental_not_found"
        assert data["details"] == {"rental_id": str(rental_id)}
        assert "errors" not in data

    def test_malformed_rental_id_returns_422(self, client):
        response = client.get("/api/rentals/123")

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "rental_id"


@pytest.mark.api
class TestOverdueRentals:
    def test_list_overdue_rentals(self, client, override_handler):
        item = OverdueRentalItem(
            rental_id=uuid7(),
            equipment_id=uuid7(),
            member_id=uuid7(),
            status="overdue",
            end_date=END,
            days_overdue=3,
            accrued_late_fee=Decimal("27.00"),
            currency="USD",
        )
        override_handler(get_overdue_rentals_handler, Success(value=[item]))

        response = client.get("/api/rentals/overdue")

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 1
        assert data["rentals"][0]["days_overdue"] == 3
        assert Decimal(data["rentals"][0]["accrued_late_fee"]) == Decimal("27.00")

    def test_process_overdue_without_body(self, client, override_handler):
        handler = override_handler(
            get_process_overdue_rentals_handler,
            Success(value=ProcessOverdueRentalsResult(processed_count=0)),
        )

        response = client.post("/api/rentals/overdue/processing")

        assert response.status_code == 200
        assert response.json() == {"processed_count": 0, "rental_ids": []}
        assert handler.received[0].as_of is None

    def test_process_overdue_with_reference_instant(self, client, override_handler):
        processed = uuid7()
        handler = override_handler(
            get_process_overdue_rentals_handler,
            Success(
                value=ProcessOverdueRentalsResult(processed_count=1, rental_ids=[processed])
            ),
        )

        response = client.post(
            "/api/rentals/overdue/processing",
            json={"as_of": "2026-05-06T00:00:00Z"},
        )

        assert response.status_code == 200
        assert response.json()["rental_ids"] == [str(processed)]
        assert handler.received[0].as_of == datetime(2026, 5, 6, tzinfo=UTC)


# =============================================================================
# Lifecycle Actions
# =============================================================================


@pytest.mark.api
class TestActivateAndCancel:
    def test_activate_rental(self, client, override_handler, rental_id, rental_result):
        override_handler(get_activate_rental_handler, Success(value=rental_result))

        response = client.put(f"/api/rentals/{rental_id}/activate")

        assert response.status_code == 200
        assert response.json()["status"] == "active"

    def test_activate_before_start_returns_409(self, client, override_handler, rental_id):
        override_handler(
            get_activate_rental_handler,
            Failure(
                error=DomainError(
                    code=ErrorCode.INVALID_STATE_TRANSITION,
                    message="Rental period has not started",
                )
            ),
        )

        response = client.put(f"/api/rentals/{rental_id}/activate")

        assert response.status_code == 409
        assert response.json()["code"] == "invalid_state_transition"

    def test_cancel_rental(self, client, override_handler, rental_id, rental_result):
        rental_result.status = "cancelled"
        rental_result.cancelled_at = datetime.now(UTC)
        override_handler(get_cancel_rental_handler, Success(value=rental_result))

        response = client.put(f"/api/rentals/{rental_id}/cancel")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "cancelled"
        assert data["cancelled_at"] is not None

    def test_cancel_overdue_returns_409(self, client, override_handler, rental_id):
        override_handler(
            get_cancel_rental_handler,
            Failure(
                error=DomainError(
                    code=ErrorCode.RENTAL_OVERDUE,
                    message="Overdue rentals must be returned",
                )
            ),
        )

        response = client.put(f"/api/rentals/{rental_id}/cancel")

        assert response.status_code == 409


@pytest.mark.api
class TestReturnRental:
    def test_return_with_fees(self, client, override_handler, rental_id):
        assessment_id = uuid7()
        handler = override_handler(
            get_return_rental_handler,
            Success(
                value=ReturnRentalResult(
                    rental_id=rental_id,
                    returned_at=datetime.now(UTC),
                    late_fee=Decimal("20.00"),
                    damage_fee=Decimal("300.00"),
                    total_cost=Decimal("395.00"),
                    currency="USD",
                    was_late=True,
                    condition_changed=True,
                    damage_assessment_id=assessment_id,
                    transaction_id="mock_fees",
                )
            ),
        )

        response = client.put(
            f"/api/rentals/{rental_id}/return",
            json={"condition_at_return": "damaged", "notes": "Cracked housing"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["was_late"] is True
        assert Decimal(data["damage_fee"]) == Decimal("300.00")
        assert data["damage_assessment_id"] == str(assessment_id)

        command = handler.received[0]
        assert command.condition_at_return == "damaged"
        assert command.notes == "Cracked housing"
        assert command.assessed_by == "system"

    def test_condition_is_required(self, client, rental_id):
        response = client.put(f"/api/rentals/{rental_id}/return", json={})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "condition_at_return"

    def test_already_returned_returns_409(self, client, override_handler, rental_id):
        override_handler(
            get_return_rental_handler,
            Failure(
                error=DomainError(
                    code=ErrorCode.RENTAL_ALREADY_RETURNED,
                    message="Rental has already been returned",
                )
            ),
        )

        response = client.put(
            f"/api/rentals/{rental_id}/return", json={"condition_at_return": "good"}
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Rental has already been returned"


@pytest.mark.api
class TestExtendRental:
    def test_extend_by_days(self, client, override_handler, rental_id):
        handler = override_handler(
            get_extend_rental_handler,
            Success(
                value=ExtendRentalResult(
                    rental_id=rental_id,
                    previous_end_date=END,
                    new_end_date=END + timedelta(days=2),
                    additional_cost=Decimal("47.50"),
                    total_cost=Decimal("118.75"),
                    currency="USD",
                    transaction_id="mock_ext",
                )
            ),
        )

        response = client.put(f"/api/rentals/{rental_id}/extend", json={"additional_days": 2})

        assert response.status_code == 200
        assert Decimal(response.json()["additional_cost"]) == Decimal("47.50")
        assert handler.received[0].additional_days == 2
        assert handler.received[0].new_end_date is None

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"additional_days": 2, "new_end_date": "2026-05-06T00:00:00Z"},
        ],
    )
    def test_requires_exactly_one_target(self, client, rental_id, payload):
        response = client.put(f"/api/rentals/{rental_id}/extend", json=payload)

        assert response.status_code == 422

    def test_non_positive_days_rejected(self, client, rental_id):
        response = client.put(f"/api/rentals/{rental_id}/extend", json={"additional_days": 0})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "additional_days"

    def test_tier_limit_returns_403(self, client, override_handler, rental_id):
        override_handler(
            get_extend_rental_handler,
            Failure(
                error=DomainError(
                    code=ErrorCode.RENTAL_PERIOD_EXCEEDS_TIER_LIMIT,
                    message="Rental period exceeds the tier maximum",
                )
            ),
        )

        response = client.put(
            f"/api/rentals/{rental_id}/extend",
            json={"new_end_date": "2026-05-20T00:00:00Z"},
        )

        assert response.status_code == 403
        assert response.json()["title"] == "Operation Not Permitted"


@pytest.mark.api
class TestDamageAssessment:
    def test_get_damage_assessment(self, client, override_handler, rental_id):
        override_handler(
            get_damage_assessment_handler,
            Success(
                value=DamageAssessmentResult(
                    id=uuid7(),
                    rental_id=rental_id,
                    equipment_id=uuid7(),
                    condition_before="excellent",
                    condition_after="poor",
                    degradation_levels=3,
                    damage_fee=Decimal("300.00"),
                    currency="USD",
                    notes="Dented",
                    assessed_by="inspector",
                    assessed_at=datetime.now(UTC),
                )
            ),
        )

        response = client.get(f"/api/rentals/{rental_id}/damage-assessment")

        assert response.status_code == 200
        data = response.json()
        assert data["rental_id"] == str(rental_id)
        assert data["degradation_levels"] == 3
        assert data["condition_after"] == "poor"

    def test_missing_assessment_returns_404(self, client, override_handler, rental_id):
        override_handler(
            get_damage_assessment_handler,
            Failure(
                error=NotFoundError(
                    code=ErrorCode.DAMAGE_ASSESSMENT_NOT_FOUND,
                    message="No damage assessment recorded for this rental",
                    resource_type="DamageAssessment",
                    resource_id=str(rental_id),
                )
            ),
        )

        response = client.get(f"/api/rentals/{rental_id}/damage-assessment")

        assert response.status_code == 404
        assert response.json()["code"] == "damage_assessment_not_found"


@pytest.mark.api
class TestUnexpectedErrors:
    def test_conflict_error_subclass_maps_to_409(self, client, override_handler, rental_id):
        override_handler(
            get_get_rental_handler,
            Failure(
                error=ConflictError(
                    code=ErrorCode.RENTAL_ALREADY_CANCELLED,
                    message="Rental is cancelled",
                    resource_type="Rental",
                )
            ),
        )

        response = client.get(f"/api/rentals/{rental_id}")

        assert response.status_code == 409

    def test_unhandled_exception_returns_500(self, override_handler, rental_id):
        from fastapi.testclient import TestClient

        from src.main import app

        override_handler(get_get_rental_handler, RaisingHandler())
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get(f"/api/rentals/{rental_id}")

        assert response.status_code == 500
        data = response.json()
        assert data["title"] == "Internal Server Error"
        assert "handler exploded" not in data["detail"]
