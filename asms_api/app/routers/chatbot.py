"""
History-backed chatbot endpoints.

Every call must carry an Authorization header. The chat endpoint records
each exchange under the ``userId`` from the request body; the history
endpoints look the user up from the header through the identity resolver.
"""

import logging

from fastapi import APIRouter, Depends, Header

from ..dependencies import get_chatbot_responder, get_history_store, get_identity_resolver
from ..errors import InternalFailure, ServiceError
from ..history import HistoryStore
from ..identity import IdentityResolver
from ..models import ChatExchange
from ..responder import ResponseGenerator
from ..schemas import (
    ChatbotRequest,
    ChatbotResponse,
    ChatExchangeOut,
    HistoryResponse,
    StatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chatbot", tags=["Chatbot"])


@router.post("/chat", response_model=ChatbotResponse)
def chat(
    request: ChatbotRequest,
    authorization: str = Header(..., alias="Authorization"),
    responder: ResponseGenerator = Depends(get_chatbot_responder),
    store: HistoryStore = Depends(get_history_store),
):
    """Answer a message and append the exchange to the user's history"""
    try:
        reply = responder.generate(request.message)
        exchange = ChatExchange(
            id=store.next_id(),
            user_id=request.user_id,
            message=request.message,
            response=reply,
        )
        store.append(request.user_id, exchange)
        logger.info(f"Recorded exchange {exchange.id} for user {request.user_id}")
        return ChatbotResponse(message=reply, timestamp=exchange.timestamp)
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"Error processing message from user {request.user_id}: {e}", exc_info=True)
        raise InternalFailure("Error processing your message")


@router.get("/history", response_model=HistoryResponse)
def get_history(
    authorization: str = Header(..., alias="Authorization"),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    store: HistoryStore = Depends(get_history_store),
):
    """Chat history of the calling user"""
    try:
        user_id = resolver.resolve(authorization)
        history = store.get(user_id)
        logger.info(f"Fetched {len(history)} exchanges for user {user_id}")
        return HistoryResponse(data=[ChatExchangeOut.from_exchange(e) for e in history])
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"Error fetching history: {e}", exc_info=True)
        raise InternalFailure("Error fetching history")


@router.delete("/history", response_model=StatusResponse)
def clear_history(
    authorization: str = Header(..., alias="Authorization"),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    store: HistoryStore = Depends(get_history_store),
):
    """Drop the calling user's chat history"""
    try:
        user_id = resolver.resolve(authorization)
        store.clear(user_id)
        return StatusResponse(message="Chat history cleared successfully")
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"Error clearing history: {e}", exc_info=True)
        raise InternalFailure("Error clearing history")
