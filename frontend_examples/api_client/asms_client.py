"""
Python API Client Library for the ASMS chat & auth service
Provides a reusable client for logging in, chatting and managing chatbot history
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

import requests


# Configure logging
logger = logging.getLogger(__name__)

QUICK_ACTIONS = [
    "Book an appointment",
    "Check appointment status",
    "View available services",
    "Contact support",
    "Cancel appointment",
    "Reschedule appointment",
]


@dataclass
class User:
    """Logged-in user as returned by /api/auth/login"""
    id: int
    username: str
    email: str
    role: str
    token: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        return cls(
            id=data['id'],
            username=data['username'],
            email=data.get('email', ''),
            role=data.get('role', 'CUSTOMER'),
            token=data['token'],
        )


@dataclass
class ChatReply:
    """Reply from either chat endpoint"""
    message: str
    timestamp: str
    success: bool = True


@dataclass
class HistoryEntry:
    """One recorded chatbot exchange"""
    id: int
    user_id: int
    message: str
    response: str
    timestamp: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistoryEntry':
        return cls(
            id=data['id'],
            user_id=data['userId'],
            message=data['message'],
            response=data['response'],
            timestamp=data['timestamp'],
        )


class ASMSAPIError(Exception):
    """Custom exception for ASMS API errors"""

    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class ASMSAPIClient:
    """
    Python client library for the ASMS chat & auth API

    Logs in against /api/auth/login, keeps the returned token and sends it as
    a Bearer Authorization header on chatbot requests.
    """

    def __init__(
        self,
        api_url: str,
        timeout: int = 30,
        max_retries: int = 3,
        retry_delay: float = 1.0
    ):
        """
        Initialize ASMS API client

        Args:
            api_url: Base URL of the service
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts on connection errors
            retry_delay: Base delay between retries in seconds
        """
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay

        self.session = requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
            'User-Agent': 'ASMS-Python-Client/1.0'
        })

        self._user: Optional[User] = None

        logger.info(f"Initialized ASMS API client for {self.api_url}")

    @property
    def user(self) -> Optional[User]:
        """Currently logged-in user"""
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def _make_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None
    ) -> requests.Response:
        """
        Make HTTP request with retry logic

        Args:
            method: HTTP method (GET, POST or DELETE)
            endpoint: API endpoint (relative to base URL)
            data: JSON payload

        Returns:
            Response object

        Raises:
            ASMSAPIError: On an HTTP error status or when all retries fail
        """
        url = f"{self.api_url}/{endpoint.lstrip('/')}"
        method = method.upper()
        if method not in ('GET', 'POST', 'DELETE'):
            raise ValueError(f"Unsupported HTTP method: {method}")

        last_exception = None

        for attempt in range(self.max_retries + 1):
            try:
                response = self.session.request(method, url, json=data, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                last_exception = e
                if attempt < self.max_retries:
                    logger.warning(f"Request failed (attempt {attempt + 1}/{self.max_retries + 1}): {e}")
                    time.sleep(self.retry_delay * (2 ** attempt))  # Exponential backoff
                    continue
                logger.error(f"Request failed after {self.max_retries + 1} attempts")
                break

            if response.status_code >= 400:
                error_data = None
                try:
                    error_data = response.json()
                except ValueError:
                    pass

                message = (error_data or {}).get('message') or response.text
                raise ASMSAPIError(
                    f"HTTP {response.status_code}: {message}",
                    status_code=response.status_code,
                    response_data=error_data
                )

            return response

        raise ASMSAPIError(f"Request failed: {last_exception}")

    def _require_login(self) -> User:
        if self._user is None:
            raise ASMSAPIError("Please log in to use the chatbot.", status_code=401)
        return self._user

    def health_check(self) -> Dict[str, Any]:
        """Return the /health payload"""
        logger.debug("Performing health check")
        response = self._make_request('GET', '/health')
        return response.json()

    def is_healthy(self) -> bool:
        try:
            health_data = self.health_check()
            return health_data.get('status') in ['healthy', 'degraded']
        except (ASMSAPIError, ValueError):
            return False

    def login(self, username: str, password: str) -> User:
        """
        Log in and remember the session token

        Raises:
            ASMSAPIError: With status_code 401 on bad credentials
        """
        response = self._make_request('POST', '/api/auth/login', data={
            'username': username,
            'password': password,
        })
        self._user = User.from_dict(response.json())
        self.session.headers['Authorization'] = f"Bearer {self._user.token}"
        logger.info(f"Logged in as {self._user.username} ({self._user.role})")
        return self._user

    def logout(self) -> None:
        """Forget the current user and token"""
        self._user = None
        self.session.headers.pop('Authorization', None)

    def chat(self, message: str, user_id: Optional[str] = None) -> ChatReply:
        """Send a message to the stateless /api/chat endpoint"""
        if not message.strip():
            raise ValueError("Message cannot be empty")

        if user_id is None:
            user_id = str(self._user.id) if self._user else 'guest'

        response = self._make_request('POST', '/api/chat', data={
            'message': message.strip(),
            'userId': str(user_id),
        })
        data = response.json()
        return ChatReply(message=data['response'], timestamp=data['timestamp'])

    def chatbot_chat(self, message: str, user_id: Optional[int] = None) -> ChatReply:
        """Send a message to the history-backed chatbot (login required)"""
        if not message.strip():
            raise ValueError("Message cannot be empty")

        user = self._require_login()
        response = self._make_request('POST', '/api/chatbot/chat', data={
            'message': message.strip(),
            'userId': user.id if user_id is None else user_id,
        })
        data = response.json()
        return ChatReply(
            message=data['message'],
            timestamp=data['timestamp'],
            success=data.get('success', True),
        )

    def get_history(self) -> List[HistoryEntry]:
        """Chatbot history of the logged-in user"""
        self._require_login()
        response = self._make_request('GET', '/api/chatbot/history')
        return [HistoryEntry.from_dict(entry) for entry in response.json().get('data', [])]

    def clear_history(self) -> str:
        """Delete the logged-in user's chatbot history"""
        self._require_login()
        response = self._make_request('DELETE', '/api/chatbot/history')
        return response.json().get('message', 'History deleted successfully')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.session.close()
        logger.debug("Closed ASMS API client session")
