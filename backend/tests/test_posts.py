"""
Integration tests for POST /content/posts.
"""

import uuid

import pytest

from batinet.config.settings import settings


class TestCreatePost:

    @pytest.mark.asyncio
    async def test_create_with_media_and_tags(self, client, seed, author_id, author_headers):
        first = await seed.media(author_id, "first")
        second = await seed.media(author_id, "second")
        roofing = await seed.tag("couverture")

        response = await client.post(
            "/content/posts",
            json={
                "title": "Charpente terminée",
                "body": "Photos du chantier",
                "tagIds": [str(roofing.id)],
                "mediaIds": [str(second.id), str(first.id)],
            },
            headers=author_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["type"] == "POST"
        assert body["authorUserId"] == str(author_id)
        assert body["isPublic"] is True
        assert [(m["id"], m["sortOrder"], m["isCover"]) for m in body["media"]] == [
            (str(second.id), 0, True),
            (str(first.id), 1, False),
        ]
        assert [t["slug"] for t in body["tags"]] == ["couverture"]

        fetched = await client.get(f"/content/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["media"] == body["media"]

    @pytest.mark.asyncio
    async def test_text_only_post(self, client, author_headers):
        response = await client.post(
            "/content/posts", json={"body": "Disponible en mars"}, headers=author_headers
        )

        assert response.status_code == 201
        assert response.json()["media"] == []
        assert response.json()["title"] is None

    @pytest.mark.asyncio
    async def test_empty_post_is_rejected(self, client, author_headers):
        response = await client.post(
            "/content/posts", json={"title": "", "mediaIds": []}, headers=author_headers
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_CONTENT"

    @pytest.mark.asyncio
    async def test_unknown_media_is_rejected(self, client, seed, author_id, author_headers):
        known = await seed.media(author_id)
        unknown = uuid.uuid4()

        response = await client.post(
            "/content/posts",
            json={"title": "x", "mediaIds": [str(known.id), str(unknown)]},
            headers=author_headers,
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_MEDIA_ID"
        assert error["details"]["missing"] == [str(unknown)]

    @pytest.mark.asyncio
    async def test_repeated_media_is_rejected(self, client, seed, author_id, author_headers):
        known = await seed.media(author_id)

        response = await client.post(
            "/content/posts",
            json={"title": "x", "mediaIds": [str(known.id), str(known.id)]},
            headers=author_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_MEDIA_ID"

    @pytest.mark.asyncio
    async def test_unknown_tag_is_rejected(self, client, author_headers):
        response = await client.post(
            "/content/posts",
            json={"title": "x", "tagIds": [str(uuid.uuid4())]},
            headers=author_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_too_many_media_fails_validation(self, client, author_headers):
        media_ids = [str(uuid.uuid4()) for _ in range(settings.POST_MAX_MEDIA + 1)]

        response = await client.post(
            "/content/posts",
            json={"title": "x", "mediaIds": media_ids},
            headers=author_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_media_quota(self, client, seed, author_id, author_headers, monkeypatch):
        monkeypatch.setattr(settings, "MEDIA_QUOTA_PER_USER", 1)
        await seed.media(author_id, "a")

        at_quota = await client.post("/content/posts", json={"title": "ok"}, headers=author_headers)
        assert at_quota.status_code == 201

        await seed.media(author_id, "b")
        over_quota = await client.post("/content/posts", json={"title": "no"}, headers=author_headers)
        assert over_quota.status_code == 400
        assert over_quota.json()["error"]["code"] == "MEDIA_QUOTA_EXCEEDED"

    @pytest.mark.asyncio
    async def test_requires_token(self, client):
        response = await client.post("/content/posts", json={"title": "x"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_failed_create_leaves_no_row(self, client, author_headers):
        await client.post(
            "/content/posts",
            json={"title": "ghost", "tagIds": [str(uuid.uuid4())]},
            headers=author_headers,
        )

        feed = (await client.get("/content")).json()
        assert feed["items"] == []


class TestCreatePostCache:

    @pytest.mark.asyncio
    async def test_create_invalidates_feed_cache(self, client, feed_cache, author_headers):
        before = (await client.get("/content")).json()
        assert before["items"] == []
        assert not feed_cache.is_empty

        created = await client.post("/content/posts", json={"title": "new"}, headers=author_headers)
        assert created.status_code == 201
        assert feed_cache.is_empty

        after = (await client.get("/content")).json()
        assert [item["id"] for item in after["items"]] == [created.json()["id"]]

    @pytest.mark.asyncio
    async def test_private_post_is_not_in_feed(self, client, author_headers):
        created = await client.post(
            "/content/posts",
            json={"title": "brouillon", "isPublic": False},
            headers=author_headers,
        )

        assert created.status_code == 201
        assert (await client.get("/content")).json()["items"] == []
        assert (await client.get(f"/content/{created.json()['id']}")).status_code == 200
