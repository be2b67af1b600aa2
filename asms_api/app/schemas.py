"""
Request and response bodies for the HTTP API (camelCase on the wire)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import ChatExchange, Role


def utf8_encodable(value):
    # JSON allows lone surrogate escapes such as "\ud800"; they cannot be sent back out
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("text is not valid UTF-8")
    return value


class LoginRequest(BaseModel):
    username: str
    password: str

    @field_validator("username", "password")
    @classmethod
    def encodable_text(cls, value):
        return utf8_encodable(value)


class LoginResponse(BaseModel):
    id: int
    username: str
    email: str
    role: Role
    token: str


class ChatRequest(BaseModel):
    """Body of POST /api/chat; userId is free-form and may arrive as a number"""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: str = Field(alias="userId")
    timestamp: Optional[str] = None

    @field_validator("message", "user_id", "timestamp")
    @classmethod
    def encodable_text(cls, value):
        return utf8_encodable(value)

    @field_validator("user_id", mode="before")
    @classmethod
    def numeric_user_id(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ChatResponse(BaseModel):
    response: str
    timestamp: str


class ChatbotRequest(BaseModel):
    """Body of POST /api/chatbot/chat"""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: int = Field(alias="userId")
    session_id: Optional[str] = Field(default=None, alias="sessionId")

    @field_validator("message", "session_id")
    @classmethod
    def encodable_text(cls, value):
        return utf8_encodable(value)

    @field_validator("user_id", mode="before")
    @classmethod
    def reject_boolean_user_id(cls, value):
        if isinstance(value, bool):
            raise ValueError("userId must be a number")
        return value


class ChatbotResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: datetime


class ChatExchangeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    message: str
    response: str
    timestamp: datetime

    @classmethod
    def from_exchange(cls, exchange: ChatExchange) -> "ChatExchangeOut":
        return cls(
            id=exchange.id,
            user_id=exchange.user_id,
            message=exchange.message,
            response=exchange.response,
            timestamp=exchange.timestamp,
        )


class HistoryResponse(BaseModel):
    success: bool = True
    data: List[ChatExchangeOut]


class StatusResponse(BaseModel):
    success: bool = True
    message: str
