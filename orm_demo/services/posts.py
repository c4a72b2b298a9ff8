import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import OperationFailedError
from ..models import Post
from ..schemas import PostOut

logger = logging.getLogger(__name__)

async def publish_post(db: AsyncSession, post_id: int = 1) -> PostOut:
    """Mark a post as published. Other fields are left as they are."""
    try:
        post = await db.get(Post, post_id)
        if post is None:
            raise OperationFailedError("update post", f"Post {post_id} not found")
        post.published = True
        await db.commit()
        # updated_at is regenerated by the database
        await db.refresh(post)
    except SQLAlchemyError as e:
        await db.rollback()
        raise OperationFailedError("update post", str(e)) from e
    logger.info(f"Published post {post.id}")
    return PostOut.model_validate(post)
