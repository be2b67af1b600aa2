"""
Domain objects shared by the verifier, the history store and the routers
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class Role(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"
    CUSTOMER = "CUSTOMER"


@dataclass(frozen=True)
class CredentialRecord:
    """One entry of a credential table; ``role`` None means derive it from the username"""
    username: str
    password: str
    role: Optional[Role] = None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ChatExchange:
    """One recorded chatbot message/response pair"""
    id: int
    user_id: int
    message: str
    response: str
    timestamp: datetime = field(default_factory=utc_now)
