"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories for attendances, payments and read-only catalogs
- Payment processor clients (Stripe over HTTP, offline cash/transfer)
- In-memory event bus and its logging subscriber

Structure:
- persistence/: Database adapters (PostgreSQL repositories, models)
- payments/: Payment processor adapters and their registry
- events/: Event bus implementation and handlers
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
