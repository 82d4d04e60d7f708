"""MemberRepository - SQLAlchemy implementation of MemberRepository protocol."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.member import Member
from src.domain.enums import MembershipTier
from src.domain.value_objects import Email, MemberId, ensure_utc
from src.infrastructure.persistence.models.member import Member as MemberModel


class MemberRepository:
    """SQLAlchemy implementation of MemberRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, member_id: MemberId) -> Member | None:
        stmt = select(MemberModel).where(MemberModel.id == member_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_email(self, email: str) -> Member | None:
        """Find member by email address.

        The address is normalized the same way Member normalizes it on
        construction, so lookups match regardless of domain casing.

        Args:
            email: Email address (raw or normalized).

        Returns:
            Member if found, None otherwise (also for malformed input).
        """
        try:
            normalized = Email(email).value
        except ValueError:
            return None

        stmt = select(MemberModel).where(MemberModel.email == normalized)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_all(self) -> list[Member]:
        stmt = select(MemberModel).order_by(MemberModel.join_date)
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def save(self, member: Member) -> None:
        """Create or update member in database.

        Raises:
            IntegrityError: If another member already uses the email.
        """
        stmt = select(MemberModel).where(MemberModel.id == member.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(member))
        else:
            self._update_model(existing, member)

        await self.session.commit()

    async def exists(self, member_id: MemberId) -> bool:
        stmt = select(MemberModel.id).where(MemberModel.id == member_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: MemberModel) -> Member:
        return Member(
            id=MemberId(model.id),
            name=model.name,
            email=model.email,
            tier=MembershipTier(model.tier),
            join_date=ensure_utc(model.join_date),
            active_rental_count=model.active_rental_count,
            total_rentals=model.total_rentals,
            is_active=model.is_active,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    def _to_model(self, entity: Member) -> MemberModel:
        return MemberModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            tier=entity.tier.value,
            join_date=entity.join_date,
            active_rental_count=entity.active_rental_count,
            total_rentals=entity.total_rentals,
            is_active=entity.is_active,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: MemberModel, entity: Member) -> None:
        model.name = entity.name
        model.email = entity.email
        model.tier = entity.tier.value
        model.active_rental_count = entity.active_rental_count
        model.total_rentals = entity.total_rentals
        model.is_active = entity.is_active
        model.updated_at = entity.updated_at
