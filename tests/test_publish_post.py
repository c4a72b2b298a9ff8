import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from orm_demo.exceptions import OperationFailedError
from orm_demo.services.posts import publish_post
from orm_demo.services.users import create_user_with_relations

pytestmark = pytest.mark.asyncio

class TestPublishPost:

    async def test_sets_published_and_keeps_other_fields(self, db_session: AsyncSession):
        user = await create_user_with_relations(
            db_session, name="ada", email="ada@example.com", post_title="Draft", bio="Hi"
        )
        post_id = user.posts[0].id
        assert post_id == 1

        post = await publish_post(db_session, post_id)

        assert post.id == 1
        assert post.published is True
        assert post.title == "Draft"
        assert post.content is None
        assert post.author_id == user.id

    async def test_defaults_to_post_one(self, db_session: AsyncSession):
        await create_user_with_relations(
            db_session, name="ada", email="ada@example.com", post_title="Draft", bio="Hi"
        )

        post = await publish_post(db_session)

        assert post.id == 1
        assert post.published is True

    async def test_missing_post(self, db_session: AsyncSession):
        with pytest.raises(OperationFailedError) as exc_info:
            await publish_post(db_session, 42)

        assert "Post 42 not found" in exc_info.value.message
        assert exc_info.value.details["operation"] == "update post"
