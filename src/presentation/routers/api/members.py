"""Member resource handlers.

Handlers:
    register_member      - Register a member
    get_member           - Get member details
    update_member_tier   - Change membership tier
    list_member_rentals  - Rental history of a member
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from src.application.commands import RegisterMember, UpdateMemberTier
from src.application.commands.handlers.register_member_handler import (
    RegisterMemberHandler,
)
from src.application.commands.handlers.update_member_tier_handler import (
    UpdateMemberTierHandler,
)
from src.application.queries import GetMember, GetMemberRentals
from src.application.queries.handlers.member_query_handlers import (
    GetMemberHandler,
    GetMemberRentalsHandler,
)
from src.core.container import (
    get_get_member_handler,
    get_member_rentals_handler,
    get_register_member_handler,
    get_update_member_tier_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.schemas.member_schemas import (
    MemberResponse,
    RegisterMemberRequest,
    UpdateMemberTierRequest,
)
from src.schemas.rental_schemas import RentalListResponse


async def register_member(
    request: Request,
    data: RegisterMemberRequest,
    handler: RegisterMemberHandler = Depends(get_register_member_handler),
) -> MemberResponse | JSONResponse:
    """Register a member.

    POST /api/members → 201 Created
    """
    result = await handler.handle(
        RegisterMember(name=data.name, email=data.email, tier=data.tier)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return MemberResponse.from_dto(result.value)


async def get_member(
    request: Request,
    member_id: Annotated[UUID, Path(description="Member UUID")],
    handler: GetMemberHandler = Depends(get_get_member_handler),
) -> MemberResponse | JSONResponse:
    """Get member details.

    GET /api/members/{member_id} → 200 OK
    """
    result = await handler.handle(GetMember(member_id=member_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return MemberResponse.from_dto(result.value)


async def update_member_tier(
    request: Request,
    member_id: Annotated[UUID, Path(description="Member UUID")],
    data: UpdateMemberTierRequest,
    handler: UpdateMemberTierHandler = Depends(get_update_member_tier_handler),
) -> MemberResponse | JSONResponse:
    """Change membership tier.

    PUT /api/members/{member_id}/tier → 200 OK
    """
    result = await handler.handle(UpdateMemberTier(member_id=member_id, tier=data.tier))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return MemberResponse.from_dto(result.value)


async def list_member_rentals(
    request: Request,
    member_id: Annotated[UUID, Path(description="Member UUID")],
    active_only: Annotated[
        bool,
        Query(description="Only pending, active and overdue rentals"),
    ] = False,
    handler: GetMemberRentalsHandler = Depends(get_member_rentals_handler),
) -> RentalListResponse | JSONResponse:
    """Rental history of a member.

    GET /api/members/{member_id}/rentals → 200 OK
    """
    result = await handler.handle(
        GetMemberRentals(member_id=member_id, active_only=active_only)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return RentalListResponse.from_dtos(result.value)
