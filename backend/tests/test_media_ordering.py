"""
Integration tests for the gallery operations on a content item.
"""

import uuid

import pytest

from batinet.shared.services.content_service import ContentService
from batinet.shared.services.feed_cache import FeedCache


def media_state(view: dict) -> list[tuple[str, int, bool]]:
    return [(m["id"], m["sortOrder"], m["isCover"]) for m in view["media"]]


class TestReorderMedia:

    @pytest.mark.asyncio
    async def test_reorder_keeps_cover_flag(self, client, seed, author_id, author_headers):
        post = await seed.content(author_id)
        a, b, c = await seed.gallery(post, author_id, 3)

        response = await client.patch(
            f"/content/{post.id}/media/reorder",
            json={"mediaIds": [str(c.id), str(a.id), str(b.id)]},
            headers=author_headers,
        )

        assert response.status_code == 200
        assert media_state(response.json()) == [
            (str(c.id), 0, False),
            (str(a.id), 1, True),
            (str(b.id), 2, False),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("shape", ["missing", "extra", "duplicate", "stranger"])
    async def test_non_permutations_are_rejected(
        self, client, seed, author_id, author_headers, shape
    ):
        post = await seed.content(author_id)
        a, b, c = await seed.gallery(post, author_id, 3)
        payloads = {
            "missing": [a.id, b.id],
            "extra": [a.id, b.id, c.id, uuid.uuid4()],
            "duplicate": [a.id, a.id, b.id],
            "stranger": [a.id, b.id, uuid.uuid4()],
        }

        response = await client.patch(
            f"/content/{post.id}/media/reorder",
            json={"mediaIds": [str(i) for i in payloads[shape]]},
            headers=author_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_MEDIA_SET"

        # nothing moved
        view = (await client.get(f"/content/{post.id}")).json()
        assert [m["id"] for m in view["media"]] == [str(a.id), str(b.id), str(c.id)]

    @pytest.mark.asyncio
    async def test_empty_gallery_accepts_empty_order(self, client, seed, author_id, author_headers):
        post = await seed.content(author_id)

        response = await client.patch(
            f"/content/{post.id}/media/reorder",
            json={"mediaIds": []},
            headers=author_headers,
        )

        assert response.status_code == 200
        assert response.json()["media"] == []


class TestRemoveMedia:

    @pytest.mark.asyncio
    async def test_removing_cover_promotes_next(self, client, seed, author_id, author_headers):
        post = await seed.content(author_id)
        a, b, c = await seed.gallery(post, author_id, 3)

        response = await client.delete(f"/content/{post.id}/media/{a.id}", headers=author_headers)

        assert response.status_code == 200
        assert media_state(response.json()) == [
            (str(b.id), 0, True),
            (str(c.id), 1, False),
        ]

    @pytest.mark.asyncio
    async def test_removing_middle_renumbers(self, client, seed, author_id, author_headers):
        post = await seed.content(author_id)
        a, b, c = await seed.gallery(post, author_id, 3)

        response = await client.delete(f"/content/{post.id}/media/{b.id}", headers=author_headers)

        assert media_state(response.json()) == [
            (str(a.id), 0, True),
            (str(c.id), 1, False),
        ]

    @pytest.mark.asyncio
    async def test_removing_last_medium_leaves_empty_gallery(
        self, client, seed, author_id, author_headers
    ):
        post = await seed.content(author_id)
        (only,) = await seed.gallery(post, author_id, 1)

        response = await client.delete(f"/content/{post.id}/media/{only.id}", headers=author_headers)

        assert response.status_code == 200
        assert response.json()["media"] == []

    @pytest.mark.asyncio
    async def test_removing_unattached_medium_changes_nothing(
        self, client, seed, author_id, author_headers
    ):
        post = await seed.content(author_id)
        a, b = await seed.gallery(post, author_id, 2)

        response = await client.delete(
            f"/content/{post.id}/media/{uuid.uuid4()}", headers=author_headers
        )

        assert response.status_code == 200
        assert media_state(response.json()) == [
            (str(a.id), 0, True),
            (str(b.id), 1, False),
        ]

    @pytest.mark.asyncio
    async def test_removing_unattached_medium_moves_cover_to_first(
        self, client, seed, author_id, author_headers
    ):
        post = await seed.content(author_id)
        a, b, c = [await seed.media(author_id, name=f"m{i}") for i in range(3)]
        await seed.attach(post, a, sort_order=0)
        await seed.attach(post, b, sort_order=1)
        await seed.attach(post, c, sort_order=2, is_cover=True)

        response = await client.delete(
            f"/content/{post.id}/media/{uuid.uuid4()}", headers=author_headers
        )

        assert response.status_code == 200
        assert media_state(response.json()) == [
            (str(a.id), 0, True),
            (str(b.id), 1, False),
            (str(c.id), 2, False),
        ]


class TestSetCover:

    @pytest.mark.asyncio
    async def test_set_cover_moves_flag(self, client, seed, author_id, author_headers):
        post = await seed.content(author_id)
        a, b, c = await seed.gallery(post, author_id, 3)

        response = await client.patch(
            f"/content/{post.id}/media/cover",
            json={"mediaId": str(c.id)},
            headers=author_headers,
        )

        assert response.status_code == 200
        assert media_state(response.json()) == [
            (str(a.id), 0, False),
            (str(b.id), 1, False),
            (str(c.id), 2, True),
        ]

    @pytest.mark.asyncio
    async def test_medium_not_in_post(self, client, seed, author_id, author_headers):
        post = await seed.content(author_id)
        await seed.gallery(post, author_id, 2)
        stranger = await seed.media(author_id, "stranger")

        response = await client.patch(
            f"/content/{post.id}/media/cover",
            json={"mediaId": str(stranger.id)},
            headers=author_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MEDIA_NOT_IN_POST"


class TestOwnershipAndLookup:

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(self, client, seed, author_id, other_headers):
        post = await seed.content(author_id)
        a, b = await seed.gallery(post, author_id, 2)

        calls = [
            client.delete(f"/content/{post.id}/media/{a.id}", headers=other_headers),
            client.patch(
                f"/content/{post.id}/media/reorder",
                json={"mediaIds": [str(b.id), str(a.id)]},
                headers=other_headers,
            ),
            client.patch(
                f"/content/{post.id}/media/cover",
                json={"mediaId": str(b.id)},
                headers=other_headers,
            ),
        ]
        for call in calls:
            response = await call
            assert response.status_code == 403
            assert response.json()["error"]["code"] == "FORBIDDEN"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_id", [str(uuid.uuid4()), "not-an-id"])
    async def test_unknown_content_is_not_found(self, client, author_headers, content_id):
        response = await client.patch(
            f"/content/{content_id}/media/cover",
            json={"mediaId": str(uuid.uuid4())},
            headers=author_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_token_is_unauthorized(self, client, seed, author_id):
        post = await seed.content(author_id)
        (only,) = await seed.gallery(post, author_id, 1)

        response = await client.delete(f"/content/{post.id}/media/{only.id}")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    @pytest.mark.asyncio
    async def test_bad_token_is_unauthorized(self, client, seed, author_id):
        post = await seed.content(author_id)

        response = await client.patch(
            f"/content/{post.id}/media/reorder",
            json={"mediaIds": []},
            headers={"Authorization": "Bearer garbage"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_get_content_not_found(self, client):
        assert (await client.get(f"/content/{uuid.uuid4()}")).status_code == 404
        assert (await client.get("/content/abc")).status_code == 404


class TestCacheInvalidation:

    @pytest.mark.asyncio
    async def test_each_mutation_invalidates_feed_cache(
        self, client, seed, feed_cache, author_id, author_headers
    ):
        post = await seed.content(author_id)
        a, b, c = await seed.gallery(post, author_id, 3)

        mutations = [
            lambda: client.patch(
                f"/content/{post.id}/media/reorder",
                json={"mediaIds": [str(b.id), str(a.id), str(c.id)]},
                headers=author_headers,
            ),
            lambda: client.patch(
                f"/content/{post.id}/media/cover",
                json={"mediaId": str(c.id)},
                headers=author_headers,
            ),
            lambda: client.delete(f"/content/{post.id}/media/{a.id}", headers=author_headers),
        ]
        for mutate in mutations:
            await client.get("/content")
            assert not feed_cache.is_empty
            response = await mutate()
            assert response.status_code == 200
            assert feed_cache.is_empty

    @pytest.mark.asyncio
    async def test_feed_reflects_new_order_after_mutation(
        self, client, seed, author_id, author_headers
    ):
        post = await seed.content(author_id)
        a, b = await seed.gallery(post, author_id, 2)
        await client.get("/content")

        await client.patch(
            f"/content/{post.id}/media/cover",
            json={"mediaId": str(b.id)},
            headers=author_headers,
        )

        item = (await client.get("/content")).json()["items"][0]
        assert [m["isCover"] for m in item["media"]] == [False, True]

    @pytest.mark.asyncio
    async def test_rejected_mutation_keeps_cache(
        self, client, seed, feed_cache, author_id, author_headers
    ):
        post = await seed.content(author_id)
        await seed.gallery(post, author_id, 2)
        await client.get("/content")

        response = await client.patch(
            f"/content/{post.id}/media/reorder",
            json={"mediaIds": []},
            headers=author_headers,
        )

        assert response.status_code == 400
        assert not feed_cache.is_empty

    @pytest.mark.asyncio
    async def test_cache_is_dropped_after_the_view_is_loaded(self, db_session, seed, author_id):
        post = await seed.content(author_id)
        a, b = await seed.gallery(post, author_id, 2)
        cache = FeedCache()
        cache.set("feed", "cached page")
        service = ContentService(db_session, cache)

        seen_during_load = []
        enrich = service.loader.enrich

        async def recording_enrich(items):
            seen_during_load.append(cache.is_empty)
            return await enrich(items)

        service.loader.enrich = recording_enrich

        view = await service.set_cover(post.id, b.id, author_id)

        assert seen_during_load == [False]
        assert cache.is_empty
        assert [m.is_cover for m in view.media] == [False, True]
