import logging
from datetime import datetime

from fastapi import APIRouter, Depends

from ..dependencies import get_chat_responder
from ..errors import InternalFailure, ServiceError
from ..responder import ResponseGenerator
from ..schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["Chat"])


@router.post("", response_model=ChatResponse)
def handle_chat_message(
    request: ChatRequest,
    responder: ResponseGenerator = Depends(get_chat_responder),
):
    """Answer a message without recording it"""
    logger.info(f"Received message from user {request.user_id} ({len(request.message)} chars)")
    try:
        reply = responder.generate(request.message)
        return ChatResponse(response=reply, timestamp=datetime.now().isoformat())
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"Chat request from user {request.user_id} failed: {e}", exc_info=True)
        raise InternalFailure("Chat request failed")
