# chat_backend/schemas.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# 字段存在性由 ChatOrchestrator 校验（返回 400 + 提示），这里全部可选
class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(default=None, alias="fullName")
    username: str | None = None
    password: str | None = None
    email: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    success: bool
    message: str
    username: str | None = None


class ChatRequest(BaseModel):
    message: str | None = None
    username: str | None = None


class ChatResponse(BaseModel):
    reply: str


class ChatEntryOut(BaseModel):
    username: str
    user_message: str = Field(serialization_alias="userMessage")
    bot_reply: str = Field(serialization_alias="botReply")
    created_at: datetime = Field(serialization_alias="createdAt")

    class Config:
        from_attributes = True  # Pydantic v2


class StatusMessage(BaseModel):
    message: str
