"""
Demo runner: seed one user with a post and a profile, then print every user.

Exit status is 0 on success and 1 on any error. The database engine is
disposed exactly once either way.
"""
import asyncio
import logging
import sys
from typing import Awaitable, Callable, List

from sqlalchemy.ext.asyncio import AsyncSession

from .config import setup_logging
from .db import connect, make_session_factory
from .schemas import PostOut, UserOut, render
from .services.posts import publish_post
from .services.users import create_user_with_relations, find_users_with_relations

logger = logging.getLogger(__name__)

DEMO_USER_NAME = "danishKodeMonkey"
DEMO_USER_EMAIL = "danish@KodeMonkey.banana"
DEMO_POST_TITLE = "Hello world"
DEMO_PROFILE_BIO = "I like bananas"

DEMO_POST_ID = 1

Routine = Callable[[AsyncSession], Awaitable[object]]


async def seed_and_list(db: AsyncSession) -> List[UserOut]:
    await create_user_with_relations(
        db,
        name=DEMO_USER_NAME,
        email=DEMO_USER_EMAIL,
        post_title=DEMO_POST_TITLE,
        bio=DEMO_PROFILE_BIO,
    )
    users = await find_users_with_relations(db)
    print(render(users))
    return users


async def publish_first_post(db: AsyncSession) -> PostOut:
    """Alternate routine: publish post 1 instead of seeding."""
    post = await publish_post(db, DEMO_POST_ID)
    print(render(post))
    return post


async def run(routine: Routine = seed_and_list, database_url: str = None) -> int:
    try:
        async with connect(database_url) as engine:
            async with make_session_factory(engine)() as db:
                await routine(db)
    except Exception:
        logger.exception(f"{routine.__name__} failed")
        return 1
    return 0


def cli():
    setup_logging()
    sys.exit(asyncio.run(run(seed_and_list)))


def cli_publish():
    setup_logging()
    sys.exit(asyncio.run(run(publish_first_post)))
