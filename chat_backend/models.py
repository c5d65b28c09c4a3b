# chat_backend/models.py
from sqlalchemy import Column, Integer, String, DateTime, Text
from datetime import datetime, timezone

from chat_backend.db import Base


def now_utc():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(128), nullable=True)
    username = Column(String(64), unique=True, index=True, nullable=False)

    # NULL 不参与唯一约束：可以有多个没填 email 的用户
    email = Column(String(255), unique=True, nullable=True)

    password_hash = Column(String(255), nullable=False)


class ChatEntry(Base):
    __tablename__ = "chat_entries"

    id = Column(Integer, primary_key=True, index=True)

    # 不做外键：允许记录不存在的用户名
    username = Column(String(64), index=True, nullable=False)

    user_message = Column(Text, nullable=False)
    bot_reply = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
