from sqlalchemy import Column, String, DateTime, Integer, Boolean, ForeignKey, Text, false
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .db import Base

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255))

    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan", order_by="Post.id")
    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")

class Post(Base):
    __tablename__ = "posts"
    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    title = Column(String(255), nullable=False)
    content = Column(Text)
    published = Column(Boolean, default=False, server_default=false(), nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    author = relationship("User", back_populates="posts")

    # Load server-generated timestamps right after INSERT/UPDATE
    __mapper_args__ = {"eager_defaults": True}

class Profile(Base):
    __tablename__ = "profiles"
    id = Column(Integer, primary_key=True, autoincrement=True)
    bio = Column(Text)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    user = relationship("User", back_populates="profile")
