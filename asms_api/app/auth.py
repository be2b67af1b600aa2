"""
Mock credential verification for the login endpoint.

Credentials are checked against a fixed table with exact, case-sensitive
comparison. There is no hashing, rate limiting or lockout; a real user
service can replace ``StaticCredentialVerifier`` through the
``get_credential_verifier`` dependency.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from .errors import AuthFailure
from .models import CredentialRecord, Role

logger = logging.getLogger(__name__)

# Test accounts: admin/admin123, customer/customer123, employee/employee123
DEFAULT_CREDENTIALS = (
    CredentialRecord("admin", "admin123"),
    CredentialRecord("customer", "customer123"),
    CredentialRecord("employee", "employee123"),
)

TOKEN_PREFIX = "mock-jwt-token-"
EMAIL_DOMAIN = "example.com"


def derive_role(username: str) -> Role:
    """Role from the username when the credential source has none"""
    name = username.lower()
    if "admin" in name:
        return Role.ADMIN
    elif "employee" in name:
        return Role.EMPLOYEE
    return Role.CUSTOMER


def derive_email(username: str) -> str:
    return f"{username}@{EMAIL_DOMAIN}"


def issue_token() -> str:
    """Opaque, non-cryptographic session token (never validated)"""
    return f"{TOKEN_PREFIX}{int(time.time() * 1000)}"


class CredentialVerifier(ABC):
    """Checks a username/password pair and returns the user's role"""

    @abstractmethod
    def verify(self, username: str, password: str) -> Role:
        """Return the role for a valid pair, raise AuthFailure otherwise"""


class StaticCredentialVerifier(CredentialVerifier):
    """Verifier over an in-process credential table"""

    def __init__(self, records: Optional[Iterable[CredentialRecord]] = None):
        if records is None:
            records = DEFAULT_CREDENTIALS
        self._records: Dict[str, CredentialRecord] = {r.username: r for r in records}

    def verify(self, username: str, password: str) -> Role:
        record = self._records.get(username)
        if record is None or record.password != password:
            logger.info(f"Login rejected for username '{username}'")
            raise AuthFailure()
        return record.role or derive_role(username)
