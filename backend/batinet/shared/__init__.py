"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic, feed cache, enrichment
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── migrations/     ← Alembic environment and revisions
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Token and identifier helpers

Usage:
======
    from batinet.shared.models import Content, ContentMedia
    from batinet.shared.repositories import ContentRepository
    from batinet.shared.services import FeedService, FeedFilters
    from batinet.shared.schemas import ContentView, FeedPage
    from batinet.shared.core import logger, BatinetException
"""
