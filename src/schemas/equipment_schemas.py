"""Equipment request and response schemas.

Pydantic schemas for equipment API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods
"""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import EquipmentResult, MaintenanceScheduleItem


# =============================================================================
# Request Schemas
# =============================================================================


class CreateEquipmentRequest(BaseModel):
    """Request to add an item to the inventory."""

    name: str = Field(..., min_length=1, max_length=200, examples=["Hammer drill"])
    description: str = Field("", max_length=2000, examples=["18V cordless"])
    category: str = Field(..., min_length=1, max_length=100, examples=["power-tools"])
    daily_rate: Decimal = Field(..., ge=0, decimal_places=2, examples=["25.00"])
    currency: str = Field("USD", min_length=3, max_length=3, examples=["USD"])
    condition: str = Field(
        "excellent",
        description="excellent, good, fair, poor, damaged or under_repair",
        examples=["excellent"],
    )
    purchase_date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Acquisition date (defaults to now)",
    )


class UpdateEquipmentRequest(BaseModel):
    """Partial update; omitted fields stay unchanged."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    category: str | None = Field(None, min_length=1, max_length=100)
    daily_rate: Decimal | None = Field(None, ge=0, decimal_places=2)
    condition: str | None = None
    maintenance_performed_at: datetime | None = Field(
        None, description="Record maintenance performed at this instant"
    )


# =============================================================================
# Response Schemas
# =============================================================================


class EquipmentResponse(BaseModel):
    id: UUID
    name: str
    description: str
    category: str
    daily_rate: Decimal
    currency: str
    condition: str
    purchase_date: datetime
    is_available: bool
    current_rental_id: UUID | None
    last_maintenance_date: datetime | None
    next_maintenance_due: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: EquipmentResult) -> "EquipmentResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            category=dto.category,
            daily_rate=dto.daily_rate,
            currency=dto.currency,
            condition=dto.condition,
            purchase_date=dto.purchase_date,
            is_available=dto.is_available,
            current_rental_id=dto.current_rental_id,
            last_maintenance_date=dto.last_maintenance_date,
            next_maintenance_due=dto.next_maintenance_due,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class EquipmentCreatedResponse(BaseModel):
    id: UUID = Field(..., description="New equipment identifier")


class EquipmentListResponse(BaseModel):
    """Equipment list response.

    Attributes:
        equipment: Matching items.
        total_count: Number of items.
    """

    equipment: list[EquipmentResponse]
    total_count: int

    @classmethod
    def from_dtos(cls, dtos: list[EquipmentResult]) -> "EquipmentListResponse":
        return cls(
            equipment=[EquipmentResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class MaintenanceScheduleItemResponse(BaseModel):
    equipment_id: UUID
    name: str
    category: str
    condition: str
    last_maintenance_date: datetime | None
    next_maintenance_due: datetime
    days_until_due: int = Field(..., description="Negative when maintenance is late")
    needs_maintenance: bool

    @classmethod
    def from_dto(cls, dto: MaintenanceScheduleItem) -> "MaintenanceScheduleItemResponse":
        return cls(
            equipment_id=dto.equipment_id,
            name=dto.name,
            category=dto.category,
            condition=dto.condition,
            last_maintenance_date=dto.last_maintenance_date,
            next_maintenance_due=dto.next_maintenance_due,
            days_until_due=dto.days_until_due,
            needs_maintenance=dto.needs_maintenance,
        )


class MaintenanceScheduleResponse(BaseModel):
    """Maintenance schedule, soonest due first.

    Attributes:
        items: One entry per item.
        due_count: Items that need maintenance now.
    """

    items: list[MaintenanceScheduleItemResponse]
    due_count: int

    @classmethod
    def from_dtos(cls, dtos: list[MaintenanceScheduleItem]) -> "MaintenanceScheduleResponse":
        return cls(
            items=[MaintenanceScheduleItemResponse.from_dto(dto) for dto in dtos],
            due_count=sum(1 for dto in dtos if dto.needs_maintenance),
        )
