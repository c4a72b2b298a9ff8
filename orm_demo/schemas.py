from datetime import datetime
from pprint import pformat
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    title: str
    content: Optional[str] = None
    published: bool
    author_id: int

class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    bio: Optional[str] = None
    user_id: int

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: Optional[str] = None
    posts: List[PostOut] = []
    profile: Optional[ProfileOut] = None


def render(value) -> str:
    """Render read models in full, with no depth limit."""
    if isinstance(value, BaseModel):
        data = value.model_dump()
    else:
        data = [item.model_dump() for item in value]
    return pformat(data, sort_dicts=False)
