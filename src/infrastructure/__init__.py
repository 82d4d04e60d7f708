"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- persistence/: SQLAlchemy models, repositories and the Database wrapper
- events/: In-memory event bus and its logging/notification subscribers
- logging/: structlog console adapter
- payments/: Mock payment processor
- notifications/: Console notification service

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
