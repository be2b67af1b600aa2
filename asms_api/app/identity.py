"""
Resolution of the caller's user id from the Authorization header.

Tokens issued by the login endpoint carry no claims, so the default
resolver returns a configured user id for any header value. A JWT-aware
resolver can be plugged in through ``get_identity_resolver``.
"""

from abc import ABC, abstractmethod

from .config import DEFAULT_USER_ID


class IdentityResolver(ABC):

    @abstractmethod
    def resolve(self, authorization: str) -> int:
        """Map an Authorization header value to a user id"""


class StaticIdentityResolver(IdentityResolver):
    """Returns the same user id for every caller"""

    def __init__(self, user_id: int = DEFAULT_USER_ID):
        self.user_id = user_id

    def resolve(self, authorization: str) -> int:
        return self.user_id
