"""Domain layer - rental business rules.

Structure:
- entities/: Equipment, Member, Rental, Reservation, DamageAssessment
- value_objects/: Money, DateRange, Email, typed identifiers
- enums/: condition scale, membership tiers, lifecycle statuses
- errors/: DomainError subclasses returned in Failure results
- events/: things that happened (published after persistence)
- protocols/: ports implemented by infrastructure adapters

No framework or infrastructure dependencies.
"""
