"""
Shared fixtures.

The application is exercised against an in-memory SQLite database: one
connection shared through StaticPool, schema created from the ORM metadata,
and the request session dependency overridden to use it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("SECRET_KEY", "test-secret")

from datetime import datetime, timedelta, timezone
from typing import Any, AsyncGenerator, Optional
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from batinet.api.dependencies.database import get_db
from batinet.api.main import create_application
from batinet.config.settings import settings
from batinet.shared.models import (
    Base,
    Comment,
    CompanyMembership,
    Content,
    ContentMedia,
    ContentType,
    MediaAsset,
    MediaType,
    Tag,
    TagLink,
    TaggableEntity,
)
from batinet.shared.utils.security import SecurityUtils


BASE_TIME = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for seeding and for service-level tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    application = create_application()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
def feed_cache(app):
    return app.state.feed_cache


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


# ═══════════════════════════════════════════════════════════════════════════════
# AUTH
# ═══════════════════════════════════════════════════════════════════════════════


def make_token(user_id: uuid.UUID) -> str:
    return SecurityUtils.create_access_token(
        user_id,
        settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def auth_headers(user_id: uuid.UUID) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def author_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def other_user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def author_headers(author_id) -> dict[str, str]:
    return auth_headers(author_id)


@pytest.fixture
def other_headers(other_user_id) -> dict[str, str]:
    return auth_headers(other_user_id)


# ═══════════════════════════════════════════════════════════════════════════════
# SEEDING
# ═══════════════════════════════════════════════════════════════════════════════


class Seeder:
    """Inserts rows directly and commits, bypassing the API and its cache."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._tick = 0

    def _next_time(self) -> datetime:
        self._tick += 1
        return BASE_TIME + timedelta(minutes=self._tick)

    async def _save(self, instance: Any) -> Any:
        self.session.add(instance)
        await self.session.commit()
        return instance

    async def content(
        self,
        author_id: uuid.UUID,
        *,
        kind: ContentType = ContentType.POST,
        title: Optional[str] = "Chantier",
        body: Optional[str] = None,
        is_public: bool = True,
        company_id: Optional[uuid.UUID] = None,
    ) -> Content:
        return await self._save(Content(
            type=kind,
            author_user_id=author_id,
            company_id=company_id,
            title=title,
            body=body,
            is_public=is_public,
            created_at=self._next_time(),
        ))

    async def media(self, owner_id: uuid.UUID, name: str = "photo") -> MediaAsset:
        return await self._save(MediaAsset(
            owner_id=owner_id,
            url=f"/uploads/{name}.webp",
            type=MediaType.IMAGE,
            mime_type="image/webp",
            width=800,
            height=600,
            size_bytes=1024,
            created_at=self._next_time(),
        ))

    async def attach(
        self,
        content: Content,
        media: MediaAsset,
        sort_order: int,
        is_cover: bool = False,
    ) -> ContentMedia:
        return await self._save(ContentMedia(
            content_id=content.id,
            media_id=media.id,
            sort_order=sort_order,
            is_cover=is_cover,
        ))

    async def gallery(self, content: Content, owner_id: uuid.UUID, count: int) -> list[MediaAsset]:
        """Attach `count` media in order; the first one is the cover."""
        assets = []
        for index in range(count):
            asset = await self.media(owner_id, name=f"m{index}")
            await self.attach(content, asset, sort_order=index, is_cover=index == 0)
            assets.append(asset)
        return assets

    async def tag(self, slug: str, tag_type: str = "TRADE") -> Tag:
        return await self._save(Tag(slug=slug, label=slug.title(), type=tag_type))

    async def tag_content(self, tag: Tag, content: Content) -> TagLink:
        return await self._save(TagLink(
            tag_id=tag.id,
            entity_type=TaggableEntity.CONTENT.value,
            entity_id=content.id,
        ))

    async def comment(self, content: Content, author_id: uuid.UUID, body: str = "Bravo") -> Comment:
        return await self._save(Comment(
            content_id=content.id,
            author_user_id=author_id,
            body=body,
            created_at=self._next_time(),
        ))

    async def membership(
        self,
        user_id: uuid.UUID,
        company_id: uuid.UUID,
        status: str = "active",
    ) -> CompanyMembership:
        return await self._save(CompanyMembership(
            user_id=user_id,
            company_id=company_id,
            roles='["ADMIN"]',
            status=status,
        ))


@pytest.fixture
def seed(db_session) -> Seeder:
    return Seeder(db_session)
