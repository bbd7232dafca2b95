"""
Blog Management API — Blog Post Repository Tests
=================================================

What:  Tests BlogPostRepository against a real (SQLite) database.
How:   Each test gets a fresh database file from the db_session fixture.

What we test:
    ✅ create + get_by_id round trip
    ✅ get_all ordering (newest first) and empty result
    ✅ update writes by primary key; NotFound on zero rows
    ✅ soft delete hides rows from every read and write
    ✅ storage failures surface as DatabaseError
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from app.exceptions import DatabaseError, NotFoundError
from app.models.blog_post import BlogPost
from app.repositories.blog_post_repository import BlogPostRepository

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_post(post_id: str, minutes: int = 0, title: str = "Title") -> BlogPost:
    ts = BASE_TIME + timedelta(minutes=minutes)
    return BlogPost(
        id=post_id,
        title=title,
        description="Description",
        body="Body",
        created_at=ts,
        updated_at=ts,
        deleted_at=None,
    )


class TestCreateAndGet:

    @pytest.mark.asyncio
    async def test_create_then_get_by_id(self, db_session):
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("p1", title="Hello"))
        await db_session.commit()

        post = await repo.get_by_id("p1")

        assert post.id == "p1"
        assert post.title == "Hello"
        assert post.description == "Description"
        assert post.body == "Body"
        assert post.deleted_at is None

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, db_session):
        repo = BlogPostRepository(db_session)

        with pytest.raises(NotFoundError):
            await repo.get_by_id("does-not-exist")

    @pytest.mark.asyncio
    async def test_create_duplicate_id_is_storage_error(self, db_session):
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("dup"))
        await db_session.commit()
        db_session.expunge_all()

        with pytest.raises(DatabaseError):
            await repo.create(make_post("dup"))

    @pytest.mark.asyncio
    async def test_get_by_id_returns_detached_entity(self, db_session):
        """Mutating the returned entity writes nothing until update()."""
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("p1", title="Before"))
        await db_session.commit()

        post = await repo.get_by_id("p1")
        post.title = "Changed in memory"
        await db_session.commit()

        fresh = (
            await db_session.execute(select(BlogPost.title).where(BlogPost.id == "p1"))
        ).scalar_one()
        assert fresh == "Before"


class TestGetAll:

    @pytest.mark.asyncio
    async def test_get_all_empty(self, db_session):
        repo = BlogPostRepository(db_session)

        assert await repo.get_all() == []

    @pytest.mark.asyncio
    async def test_get_all_newest_first(self, db_session):
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("old", minutes=0))
        await repo.create(make_post("new", minutes=10))
        await repo.create(make_post("mid", minutes=5))
        await db_session.commit()

        posts = await repo.get_all()

        assert [p.id for p in posts] == ["new", "mid", "old"]


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_persists_fields(self, db_session):
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("p1"))
        await db_session.commit()

        post = await repo.get_by_id("p1")
        post.title = "New title"
        post.body = "New body"
        post.updated_at = BASE_TIME + timedelta(hours=1)
        await repo.update(post)
        await db_session.commit()

        stored = await repo.get_by_id("p1")
        assert stored.title == "New title"
        assert stored.body == "New body"
        assert stored.description == "Description"
        assert stored.updated_at.replace(tzinfo=timezone.utc) == BASE_TIME + timedelta(hours=1)

    @pytest.mark.asyncio
    async def test_update_missing_row(self, db_session):
        repo = BlogPostRepository(db_session)

        with pytest.raises(NotFoundError):
            await repo.update(make_post("ghost"))


class TestSoftDelete:

    @pytest.mark.asyncio
    async def test_delete_hides_post(self, db_session):
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("p1"))
        await repo.create(make_post("p2", minutes=1))
        await db_session.commit()

        await repo.delete("p1")
        await db_session.commit()

        with pytest.raises(NotFoundError):
            await repo.get_by_id("p1")
        assert [p.id for p in await repo.get_all()] == ["p2"]

    @pytest.mark.asyncio
    async def test_delete_keeps_row_with_marker(self, db_session):
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("p1"))
        await db_session.commit()

        await repo.delete("p1")
        await db_session.commit()

        deleted_at = (
            await db_session.execute(select(BlogPost.deleted_at).where(BlogPost.id == "p1"))
        ).scalar_one()
        assert deleted_at is not None

    @pytest.mark.asyncio
    async def test_delete_twice_is_not_found(self, db_session):
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("p1"))
        await db_session.commit()

        await repo.delete("p1")
        with pytest.raises(NotFoundError):
            await repo.delete("p1")

    @pytest.mark.asyncio
    async def test_delete_missing(self, db_session):
        repo = BlogPostRepository(db_session)

        with pytest.raises(NotFoundError):
            await repo.delete("ghost")

    @pytest.mark.asyncio
    async def test_update_deleted_post_is_not_found(self, db_session):
        repo = BlogPostRepository(db_session)
        await repo.create(make_post("p1"))
        await db_session.commit()

        post = await repo.get_by_id("p1")
        await repo.delete("p1")
        post.title = "Too late"

        with pytest.raises(NotFoundError):
            await repo.update(post)
