from typing import List
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..exceptions import OperationFailedError
from ..models import Post, Profile, User
from ..schemas import UserOut

logger = logging.getLogger(__name__)

async def create_user_with_relations(db: AsyncSession, *, name: str, email: str, post_title: str, bio: str) -> User:
    """Create a user together with one post and one profile in a single commit."""
    user = User(
        name=name,
        email=email,
        posts=[Post(title=post_title)],
        profile=Profile(bio=bio),
    )
    try:
        db.add(user)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise OperationFailedError("create user", str(e)) from e
    logger.info(f"Created user {user.id} <{user.email}> with 1 post and a profile")
    return user

async def find_users_with_relations(db: AsyncSession) -> List[UserOut]:
    """Return every user with posts and profile loaded."""
    stmt = (
        select(User)
        .options(selectinload(User.posts), selectinload(User.profile))
        .order_by(User.id)
        .execution_options(populate_existing=True)
    )
    try:
        users = (await db.execute(stmt)).scalars().all()
    except SQLAlchemyError as e:
        raise OperationFailedError("find users", str(e)) from e
    logger.info(f"Loaded {len(users)} user(s)")
    return [UserOut.model_validate(u) for u in users]
