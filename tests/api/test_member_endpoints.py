"""API tests for member endpoints.

- POST /api/members (register)
- GET /api/members/{id}
- PUT /api/members/{id}/tier
- GET /api/members/{id}/rentals
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from uuid_extensions import uuid7

from src.application.dtos import MemberResult
from src.core.container import (
    get_get_member_handler,
    get_member_rentals_handler,
    get_register_member_handler,
    get_update_member_tier_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError, ValidationError
from src.core.result import Failure, Success


@pytest.fixture
def member_id():
    return uuid7()


@pytest.fixture
def member_result(member_id):
    now = datetime.now(UTC)
    return MemberResult(
        id=member_id,
        name="Grace Hopper",
        email="grace@navy.mil",
        tier="gold",
        join_date=now,
        active_rental_count=0,
        total_rentals=0,
        is_active=True,
        discount_percentage=Decimal("10"),
        max_concurrent_rentals=5,
        max_rental_days=21,
        created_at=now,
        updated_at=now,
    )


def member_not_found(member_id) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.MEMBER_NOT_FOUND,
        message="Member not found",
        resource_type="Member",
        resource_id=str(member_id),
    )


@pytest.mark.api
class TestRegisterMember:
    def test_register_returns_201(self, client, override_handler, member_result):
        handler = override_handler(get_register_member_handler, Success(value=member_result))

        response = client.post(
            "/api/members",
            json={"name": "Grace Hopper", "email": "grace@Navy.MIL", "tier": "gold"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "grace@navy.mil"
        assert data["max_concurrent_rentals"] == 5
        assert Decimal(data["discount_percentage"]) == Decimal("10")
        assert handler.received[0].email == "grace@Navy.MIL"

    def test_tier_defaults_to_basic(self, client, override_handler, member_result):
        handler = override_handler(get_register_member_handler, Success(value=member_result))

        client.post("/api/members", json={"name": "Ada", "email": "ada@example.com"})

        assert handler.received[0].tier == "basic"

    def test_duplicate_email_returns_409(self, client, override_handler):
        override_handler(
            get_register_member_handler,
            Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="A member with this email already exists",
                    resource_type="Member",
                    conflicting_field="email",
                )
            ),
        )

        response = client.post(
            "/api/members", json={"name": "Ada", "email": "ada@example.com"}
        )

        assert response.status_code == 409
        assert response.json()["code"] == "email_already_exists"

    def test_invalid_email_returns_400(self, client, override_handler):
        override_handler(
            get_register_member_handler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL,
                    message="Invalid email address",
                    field="email",
                )
            ),
        )

        response = client.post("/api/members", json={"name": "Ada", "email": "nope"})

        assert response.status_code == 400
        assert response.json()["errors"][0] == {
            "field": "email",
            "code": "invalid_email",
            "message": "Invalid email address",
        }

    def test_missing_name_returns_422(self, client):
        response = client.post("/api/members", json={"email": "ada@example.com"})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "name"


@pytest.mark.api
class TestGetMember:
    def test_get_member(self, client, override_handler, member_id, member_result):
        override_handler(get_get_member_handler, Success(value=member_result))

        response = client.get(f"/api/members/{member_id}")

        assert response.status_code == 200
        assert response.json()["tier"] == "gold"

    def test_get_member_not_found(self, client, override_handler, member_id):
        override_handler(get_get_member_handler, Failure(error=member_not_found(member_id)))

        response = client.get(f"/api/members/{member_id}")

        assert response.status_code == 404


@pytest.mark.api
class TestUpdateMemberTier:
    def test_update_tier(self, client, override_handler, member_id, member_result):
        member_result.tier = "platinum"
        handler = override_handler(get_update_member_tier_handler, Success(value=member_result))

        response = client.put(f"/api/members/{member_id}/tier", json={"tier": "platinum"})

        assert response.status_code == 200
        assert response.json()["tier"] == "platinum"
        assert handler.received[0].member_id == member_id
        assert handler.received[0].tier == "platinum"

    def test_tier_required(self, client, member_id):
        response = client.put(f"/api/members/{member_id}/tier", json={})

        assert response.status_code == 422


@pytest.mark.api
class TestMemberRentals:
    def test_list_member_rentals(self, client, override_handler, member_id):
        handler = override_handler(get_member_rentals_handler, Success(value=[]))

        response = client.get(f"/api/members/{member_id}/rentals", params={"active_only": "true"})

        assert response.status_code == 200
        assert response.json() == {"rentals": [], "total_count": 0}
        assert handler.received[0].active_only is True

    def test_unknown_member(self, client, override_handler, member_id):
        override_handler(get_member_rentals_handler, Failure(error=member_not_found(member_id)))

        response = client.get(f"/api/members/{member_id}/rentals")

        assert response.status_code == 404
