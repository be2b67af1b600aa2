"""
FastAPI dependency providers for the service's collaborators.

Each provider returns a process-wide instance. Tests and deployments swap
any of them through ``app.dependency_overrides``.
"""

from .auth import CredentialVerifier, StaticCredentialVerifier
from .history import HistoryStore, InMemoryHistoryStore
from .identity import IdentityResolver, StaticIdentityResolver
from .responder import ResponseGenerator, asms_chatbot_generator, vx_service_generator

_credential_verifier = StaticCredentialVerifier()
_history_store = InMemoryHistoryStore()
_identity_resolver = StaticIdentityResolver()
_chat_responder = vx_service_generator()
_chatbot_responder = asms_chatbot_generator()


def get_credential_verifier() -> CredentialVerifier:
    return _credential_verifier


def get_history_store() -> HistoryStore:
    return _history_store


def get_identity_resolver() -> IdentityResolver:
    return _identity_resolver


def get_chat_responder() -> ResponseGenerator:
    """Rule table for the stateless /api/chat endpoint"""
    return _chat_responder


def get_chatbot_responder() -> ResponseGenerator:
    """Rule table for the history-backed /api/chatbot endpoints"""
    return _chatbot_responder
